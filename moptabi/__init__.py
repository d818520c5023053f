"""MopTabi travel planning API.

The package is a regular package so ``moptabi`` always resolves to this
source tree rather than to a namespace package found elsewhere on the path.
"""
