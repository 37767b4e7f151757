"""Bindings between the mode layer and concrete editor widgets."""
