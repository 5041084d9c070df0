"""Typed names and the error taxonomy shared across kwapprox."""
