from cssbuild.objects.codec import from_json, to_json
from cssbuild.objects.rectangle import Rectangle

__all__ = ["Rectangle", "from_json", "to_json"]
