"""
Metric engines. Pure: (labels, prediction frame) → metrics dict.
"""
