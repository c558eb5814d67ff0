"""
Core domain models, expression evaluation and contracts.

This module contains the building blocks that are independent of storage
and presentation: tokens, outcomes, the sanitize/tokenize/evaluate pipeline.
"""
