"""
Boardroom persona service: persona reply orchestration and conversation summaries
"""

__version__ = "1.0.0"
