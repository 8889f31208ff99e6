"""
Boardroom persona service API
"""
