from .link_resolver import LinkResolver, extract_final_link

__all__ = ["LinkResolver", "extract_final_link"]
