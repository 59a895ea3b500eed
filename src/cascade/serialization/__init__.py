from cascade.serialization.json_codec import deserialize, serialize

__all__ = ["serialize", "deserialize"]
