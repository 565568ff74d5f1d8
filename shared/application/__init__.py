# Shared application module
from .base_use_case import UseCase, UseCaseResult
from .parsing import parse_enum, parse_optional_enum

__all__ = ['UseCase', 'UseCaseResult', 'parse_enum', 'parse_optional_enum']
