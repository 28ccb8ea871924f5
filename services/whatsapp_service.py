# services/whatsapp_service.py
"""
WhatsApp bill summaries.

Builds the pre-filled "click to chat" link a landlord opens to send a bill
to the tenant. Nothing is sent from the server.
"""
from typing import Iterable, Optional
from urllib.parse import quote

from models.bill import BillStatus

WHATSAPP_SEND_URL = "https://api.whatsapp.com/send"

# Characters left unescaped by JavaScript's encodeURIComponent
URI_COMPONENT_SAFE = "-_.!~*'()"


def normalize_phone(contact_number: str, country_code: str) -> str:
     """Prefix the country code unless the number already carries it."""
     number = contact_number.strip()
     if number.startswith(country_code):
          return number
     return f"{country_code}{number}"


def build_bill_message(
     tenant_name: Optional[str],
     rent: int,
     electric: Optional[int],
     gas: Optional[int],
     water: Optional[int],
     custom_fields: Optional[Iterable],
     total: int,
     status: BillStatus,
     description: Optional[str] = None,
     currency: str = "PKR"
) -> str:
     lines = [
          f"Bill Details for {tenant_name or 'Tenant'}:",
          f"Rent: {currency} {rent}",
          f"Electric: {currency} {electric or 0}",
          f"Gas: {currency} {gas or 0}",
          f"Water: {currency} {water or 0}",
     ]
     for field in custom_fields or ():
          name, amount = (field["name"], field["amount"]) if isinstance(field, dict) else (field.name, field.amount)
          lines.append(f"{name}: {currency} {amount}")
     lines.append(f"Total: {currency} {total}")
     lines.append(f"Status: {BillStatus(status).value.capitalize()}")
     if description:
          lines.append(f"Description: {description}")
     return "\n".join(lines)


def build_whatsapp_url(phone: str, message: str) -> str:
     return f"{WHATSAPP_SEND_URL}?phone={phone}&text={quote(message, safe=URI_COMPONENT_SAFE)}"
