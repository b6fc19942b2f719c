"""
The CONTROLLER layer translates user input into engine symbols.
"""
