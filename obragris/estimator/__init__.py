"""
Material takeoff engine for obra gris.

Pure Python math. No AI. No Gemini.
Given the five geometric inputs and a construction system, produce the
ordered bill of materials with quantities, units and applied prices.
"""
