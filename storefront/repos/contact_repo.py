from sqlalchemy.orm import Session

from storefront.data.models.contact import ContactModel


class ContactRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_contact(self, contact: ContactModel) -> ContactModel:
        self.db.add(contact)
        self.db.commit()
        self.db.refresh(contact)
        return contact
