"""
The CONTROLLER layer drives the model: the timed update loop and its FPS counter.
"""
