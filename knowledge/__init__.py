"""
Growth Predictor knowledge base.

Contains the reference data the queries run against:
- Height and weight distributions by age
"""
