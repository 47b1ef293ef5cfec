from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import get_relay_client
from storefront.data.database import get_db
from storefront.domain.errors import InvalidInput, RelayError
from storefront.domain.schemas import ContactIn, ContactOut
from storefront.services.contact_service import ContactService
from storefront.services.relay_client import RelayClient

router = APIRouter(prefix="/api/contact", tags=["contact"])


@router.post("", response_model=ContactOut)
def submit_contact(
    payload: ContactIn,
    db: Session = Depends(get_db),
    relay_client: RelayClient = Depends(get_relay_client),
):
    service = ContactService(db, relay_client)
    try:
        service.submit_contact(payload.name, payload.email, payload.subject, payload.message)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RelayError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return ContactOut()
