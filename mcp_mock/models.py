"""
JSON-RPC 2.0 envelopes and tool descriptors
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


class ToolDescriptor(BaseModel):
    """A tool as advertised by ``tools/list``"""
    model_config = {"frozen": True}

    name: str
    description: str = ""
    parameters: Dict[str, Any] = Field(default_factory=dict)


class ErrorObject(BaseModel):
    code: int
    message: str


# ``id`` is echoed back exactly as the client sent it, so it stays untyped
class SuccessResponse(BaseModel):
    jsonrpc: str = "2.0"
    result: Dict[str, Any]
    id: Any = None


class ErrorResponse(BaseModel):
    jsonrpc: str = "2.0"
    error: ErrorObject
    id: Any = None


def make_result(id: Any, result: Dict[str, Any]) -> Dict[str, Any]:
    """Build a success envelope echoing ``id`` unchanged"""
    return SuccessResponse(result=result, id=id).model_dump()


def make_error(id: Any, code: int, message: str) -> Dict[str, Any]:
    """Build an error envelope echoing ``id`` unchanged"""
    return ErrorResponse(error=ErrorObject(code=code, message=message), id=id).model_dump()
