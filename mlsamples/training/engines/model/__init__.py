#!filepath: mlsamples/training/engines/model/__init__.py
"""
Concrete ModelTrainEngine implementations.

This module is an organizational namespace only.
"""
