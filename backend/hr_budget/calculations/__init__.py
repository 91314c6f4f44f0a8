"""Allowance and benefit calculators.

Every calculator is a pure function over schema instances: inputs are never
mutated and each call builds fresh result records.
"""
