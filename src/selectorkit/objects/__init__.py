from selectorkit.objects.rectangle import Rectangle
from selectorkit.objects.serialization import from_json, get_json

__all__ = ["Rectangle", "from_json", "get_json"]
