from fastapi import HTTPException, Request

from openwsdl.exceptions import WsdlError
from openwsdl.integrations.pydantic import PydanticDocument, from_dataclass
from openwsdl.parser import extract


async def get_wsdl_document(request: Request) -> PydanticDocument:
    """
    FastAPI dependency that extracts an uploaded WSDL payload
    and returns it as a Pydantic model.
    """
    body = await request.body()
    if not body:
        raise HTTPException(status_code=400, detail="Empty payload")

    try:
        document = extract(body)
    except WsdlError as e:
        raise HTTPException(
            status_code=422,
            detail={"message": "WSDL extraction failed", "error": str(e)},
        )

    return from_dataclass(document)
