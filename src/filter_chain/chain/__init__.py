"""
Chain Package - Dependent Filters and Their Orchestration.

    - DependentFilter: one link, filtering upstream rows by a live parameter
    - FilterChain: ordered links, each reading the previous one
    - Session: owner of the parameter store and declared chains
"""

from filter_chain.chain.dependent_filter import DependentFilter
from filter_chain.chain.filter_chain import FilterChain
from filter_chain.chain.session import Session

__all__ = ["DependentFilter", "FilterChain", "Session"]
