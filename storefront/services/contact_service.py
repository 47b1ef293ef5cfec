# storefront/services/contact_service.py
from sqlalchemy.orm import Session

from storefront.data.models.contact import ContactModel
from storefront.domain.errors import InvalidInput
from storefront.repos.contact_repo import ContactRepo
from storefront.services.relay_client import RelayClient
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class ContactService:
    def __init__(self, db: Session, relay_client: RelayClient):
        self.repo = ContactRepo(db)
        self.relay_client = relay_client

    def submit_contact(self, name: str, email: str, subject: str, message: str) -> ContactModel:
        """
        Saves the submission, then forwards it to the relay.
        The saved row stays even when forwarding fails (RelayError propagates).
        """
        fields = {"name": name, "email": email, "subject": subject, "message": message}
        if any(not (v or "").strip() for v in fields.values()):
            raise InvalidInput("All fields are required.")

        contact = self.repo.create_contact(ContactModel(**fields))
        logger.info(f"Saved contact {contact.id} from {email}")

        if not self.relay_client.enabled:
            logger.warning(f"Contact relay not configured, contact {contact.id} not forwarded")
            return contact

        try:
            self.relay_client.forward(name, email, subject, message)
        except Exception as e:
            logger.error(f"Forwarding contact {contact.id} failed: {e}")
            raise

        return contact
