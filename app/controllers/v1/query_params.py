from typing import Type, TypeVar

from fastapi import HTTPException, Request, status
from pydantic import BaseModel, ValidationError

FiltersT = TypeVar("FiltersT", bound=BaseModel)


def parse_filters(model: Type[FiltersT], request: Request) -> FiltersT:
    """Build a filter model from the raw query string.

    Unknown parameters and malformed values are rejected with 400.
    """
    try:
        return model.model_validate(dict(request.query_params))
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'query'}: {err['msg']}" for err in e.errors()
        )
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid query parameters: {problems}")
