"""
The VIEW layer holds the PySide6 widgets. It only talks to the engine through
`press()` and the read-only projections.
"""
