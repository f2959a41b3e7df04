"""Calibration utilities.

Calibration *produces* distribution parameters (the Poisson rate) from
observed counts; the resulting facade is then used for evaluation.
"""
