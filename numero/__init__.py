"""
Numero converts between decimal numbers and their English numerals.

Architecture: Classifier → (Number parts → Group words) | (Terms → Place merges)
Range:        short scale up to centillion (10^303), long scale up to centilliard (10^603)
"""

__version__ = "1.0.0"
