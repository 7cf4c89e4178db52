"""
Agent implementations for ReviewPulse.

Contains all agent modules that process reviews through the pipeline:
- Ingestion Agent
- Review Normalization Agent (with Sentiment Classifier and Keyword Extractor)
- Review Aggregator
- Theme Detector
- Keyword Market Analyzer
"""
