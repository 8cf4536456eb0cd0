"""
The APP layer: shared Qt state objects and the widget tree that renders them.
"""
