"""
lexpipe - English tokenization and inflectional lemmatization service.
"""

__version__ = "1.0.0"
