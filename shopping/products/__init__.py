"""
Product samples.
"""
