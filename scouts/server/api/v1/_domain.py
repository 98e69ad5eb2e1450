"""Build domain models from request data."""

from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from scouts.core.errors import InvalidEntityError

M = TypeVar("M", bound=BaseModel)


def build_domain(model: Type[M], **values: Any) -> M:
    """
    Construct a domain model from request values.

    Raises:
        InvalidEntityError: If the domain model rejects the values.
    """
    try:
        return model(**values)
    except ValidationError as e:
        raise InvalidEntityError(
            model.__name__, e.errors(include_url=False, include_context=False, include_input=False)
        ) from e
