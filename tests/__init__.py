"""
Test suite for textpager.
"""
