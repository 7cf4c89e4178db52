"""
Utility modules for ReviewPulse.

Cross-cutting concerns:
- Text: Word tokenization
- Numbers: Half-up rounding for report percentages
- Storage: File I/O helpers for raw inputs and report exports
"""
