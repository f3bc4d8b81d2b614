from typing import Callable, Dict

parser_registry: Dict[str, Callable] = {}

def register_parser(lease_format: str, parser_func: Callable):
    parser_registry[lease_format] = parser_func

def get_parser(lease_format: str) -> Callable | None:
    return parser_registry.get(lease_format)
