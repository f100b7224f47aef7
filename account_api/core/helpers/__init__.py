from .update_helper import only_request_fields, merge_fields

__all__ = ["only_request_fields", "merge_fields"]
