"""
Prompt construction for the generation agents.
"""
