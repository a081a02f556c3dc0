from design_tokens.services.build import BuildService, BuiltFile, check_names

__all__ = [
    "BuildService",
    "BuiltFile",
    "check_names",
]
