"""
The MODEL layer contains pure data structures and the simulation logic.
It has NO knowledge of the GUI (Qt) or of the timers driving it.
It deals with Fragments, Lanes, Motion and the Run State.
"""
