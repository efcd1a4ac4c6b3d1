"""
The VIEW layer renders the simulation state with Qt widgets.
It reads state from the Run Controller signals and never mutates the model.
"""
