"""Application services: scenarios and performance testing."""
from .scenario import Scenario, SearchResult
from .performance import PerformanceTester, PerformanceReport, TimingStats

__all__ = ['Scenario', 'SearchResult', 'PerformanceTester', 'PerformanceReport', 'TimingStats']
