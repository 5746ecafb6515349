from fastapi import HTTPException

from covid_api.results import Failure


def upstream_error(failure: Failure) -> HTTPException:
    return HTTPException(
        status_code=502,
        detail={
            "code": "UpstreamError",
            "description": failure.error,
        },
    )


def invalid_parameter(description: str) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={
            "code": "InvalidParameterValue",
            "description": description,
        },
    )
