"""
Test suite for stylecascade project.

This module contains all unit tests for the stylecascade package.
"""
