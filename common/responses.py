from rest_framework import status as http_status
from rest_framework.response import Response


def envelope(data=None, message=None, status=http_status.HTTP_200_OK, **extra):
    """
    Build the ``{"message": ..., "data": ...}`` body every endpoint returns.
    Keys are only present when they carry something.
    """
    body = {}
    if message is not None:
        body["message"] = message
    body.update(extra)
    if data is not None:
        body["data"] = data
    return Response(body, status=status)


def bulk_result(updated, errors, ok_message, partial_message):
    """200 when every item went through, 207 Multi-Status with the failures otherwise."""
    if errors:
        return envelope(
            {"updated": updated},
            message=partial_message,
            status=http_status.HTTP_207_MULTI_STATUS,
            errors=errors,
        )
    return envelope({"updated": updated}, message=ok_message)
