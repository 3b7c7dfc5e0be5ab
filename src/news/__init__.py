"""
News Module
===========

Ingestion pipeline for RSS news:
- Feed aggregation across configured sources
- Dedup and same-day freshness filtering
- Full-text extraction and length-checked summarization
- Throttled publishing of posts with their category links
"""
