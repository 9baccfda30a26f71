from objkit.shapes.rectangle import Rectangle

__all__ = ["Rectangle"]
