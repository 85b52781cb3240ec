"""Renderers for the picker: a customtkinter window (desktop) and a Flask page (web).

Both only read Engine snapshots and feed commands back; neither filters or
ranks anything itself.
"""
