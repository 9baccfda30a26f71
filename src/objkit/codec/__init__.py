from objkit.codec.json_codec import BoundValue, bind, deserialize, serialize

__all__ = ["BoundValue", "bind", "deserialize", "serialize"]
