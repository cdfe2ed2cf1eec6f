# simulations/__init__.py
"""
Monte Carlo simulations for the higher-lower guessing strategies.

Print the success rate of every strategy via:
    python -m simulations.report

Plot them side by side via:
    python -m simulations.compare
"""
