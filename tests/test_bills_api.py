"""
API tests for /api/bills, including the end-to-end landlord flow.
"""
from urllib.parse import parse_qs, urlparse

import pytest
from httpx import AsyncClient

from models import Bill


async def _create_profile(client: AsyncClient, headers: dict, name: str = "Ali") -> dict:
     response = await client.post(
          "/api/profiles",
          json={"tenantName": name, "contactNumber": "03001234567"},
          headers=headers,
     )
     assert response.status_code == 201, response.text
     return response.json()


def _bill_count(database) -> int:
     with database.session() as db:
          return db.query(Bill).count()


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_bill_computes_total(client: AsyncClient, landlord) -> None:
     _, headers = landlord
     profile = await _create_profile(client, headers)

     response = await client.post(
          "/api/bills",
          json={
               "profileId": profile["id"],
               "rent": 20000,
               "electric": 1500,
               "gas": 800,
               "water": 300,
               "customFields": [{"name": "Internet", "amount": 2000}],
               "contactNumber": "3001234567",
               "description": "March",
          },
          headers=headers,
     )
     assert response.status_code == 201, response.text
     bill = response.json()

     assert isinstance(bill["id"], int)
     assert bill["profileId"] == profile["id"]
     assert bill["total"] == 24600
     assert bill["status"] == "pending"
     assert bill["customFields"] == [{"name": "Internet", "amount": 2000}]
     assert bill["contactNumber"] == "3001234567"
     assert bill["description"] == "March"
     assert bill["date"]


@pytest.mark.asyncio
async def test_create_bill_accepts_string_amounts_and_blank_utilities(client: AsyncClient, landlord) -> None:
     _, headers = landlord
     profile = await _create_profile(client, headers)

     response = await client.post(
          "/api/bills",
          json={
               "profileId": str(profile["id"]),
               "rent": "15000",
               "electric": "",
               "gas": "700",
               "water": None,
               "contactNumber": "3001234567",
          },
          headers=headers,
     )
     assert response.status_code == 201, response.text
     bill = response.json()
     assert bill["rent"] == 15000
     assert bill["electric"] is None
     assert bill["gas"] == 700
     assert bill["water"] is None
     assert bill["customFields"] is None
     assert bill["total"] == 15700


@pytest.mark.asyncio
async def test_contact_number_is_a_snapshot(client: AsyncClient, landlord) -> None:
     _, headers = landlord
     profile = await _create_profile(client, headers)
     created = await client.post(
          "/api/bills",
          json={"profileId": profile["id"], "rent": 100, "contactNumber": "3001234567"},
          headers=headers,
     )

     await client.put(
          f"/api/profiles/{profile['id']}",
          json={"tenantName": "Ali", "contactNumber": "3110000000", "rent": 99999},
          headers=headers,
     )

     listing = await client.get("/api/bills", params={"profileId": profile["id"]}, headers=headers)
     bill = listing.json()[0]
     assert bill["id"] == created.json()["id"]
     assert bill["contactNumber"] == "3001234567"
     assert bill["total"] == 100


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["rent", "contactNumber", "profileId"])
async def test_missing_required_field_creates_nothing(client: AsyncClient, landlord, database, missing) -> None:
     _, headers = landlord
     profile = await _create_profile(client, headers)
     body = {"profileId": profile["id"], "rent": 15000, "contactNumber": "3001234567"}
     del body[missing]

     before = _bill_count(database)
     response = await client.post("/api/bills", json=body, headers=headers)

     assert response.status_code == 400
     assert response.json() == {"error": f"{missing} is required"}
     assert _bill_count(database) == before


@pytest.mark.asyncio
@pytest.mark.parametrize("body_update", [
     {"rent": -1},
     {"water": -50},
     {"customFields": [{"name": "Refund", "amount": -100}]},
     {"customFields": [{"name": "", "amount": 100}]},
     {"rent": "abc"},
])
async def test_malformed_amounts_are_rejected(client: AsyncClient, landlord, database, body_update) -> None:
     _, headers = landlord
     profile = await _create_profile(client, headers)
     body = {"profileId": profile["id"], "rent": 15000, "contactNumber": "3001234567"}
     body.update(body_update)

     response = await client.post("/api/bills", json=body, headers=headers)
     assert response.status_code == 400
     assert _bill_count(database) == 0


@pytest.mark.asyncio
async def test_cannot_bill_another_landlords_profile(client: AsyncClient, landlord, other_landlord, database) -> None:
     _, headers = landlord
     _, other_headers = other_landlord
     profile = await _create_profile(client, headers)

     response = await client.post(
          "/api/bills",
          json={"profileId": profile["id"], "rent": 15000, "contactNumber": "3001234567"},
          headers=other_headers,
     )
     assert response.status_code == 404
     assert response.json() == {"error": "Profile not found"}
     assert _bill_count(database) == 0


@pytest.mark.asyncio
async def test_create_bill_requires_authentication_first(client: AsyncClient) -> None:
     response = await client.post("/api/bills", json={"profileId": 1})
     assert response.status_code == 401


@pytest.mark.asyncio
async def test_malformed_json_without_token_is_unauthenticated(client: AsyncClient) -> None:
     response = await client.post(
          "/api/bills",
          content=b"{not json",
          headers={"Content-Type": "application/json"},
     )
     assert response.status_code == 401
     assert response.json() == {"error": "Missing token"}


@pytest.mark.asyncio
async def test_malformed_json_with_token_is_invalid_input(client: AsyncClient, landlord) -> None:
     _, headers = landlord
     response = await client.post(
          "/api/bills",
          content=b"{not json",
          headers={**headers, "Content-Type": "application/json"},
     )
     assert response.status_code == 400
     assert response.json() == {"error": "Malformed JSON body"}


@pytest.mark.asyncio
@pytest.mark.parametrize("body_update", [
     {"rent": 10**19},
     {"electric": 2**31},
     {"customFields": [{"name": "Internet", "amount": 10**19}]},
])
async def test_amounts_beyond_storage_range_are_rejected(client: AsyncClient, landlord, database, body_update) -> None:
     _, headers = landlord
     profile = await _create_profile(client, headers)
     body = {"profileId": profile["id"], "rent": 15000, "contactNumber": "3001234567"}
     body.update(body_update)

     response = await client.post("/api/bills", json=body, headers=headers)
     assert response.status_code == 400
     assert "error" in response.json()
     assert _bill_count(database) == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/bills", "/api/bills/preview"])
async def test_total_beyond_storage_range_is_rejected(client: AsyncClient, landlord, database, path) -> None:
     _, headers = landlord
     profile = await _create_profile(client, headers)
     body = {
          "profileId": profile["id"],
          "rent": 2**31 - 1,
          "customFields": [{"name": "Internet", "amount": 2**31 - 1}],
          "contactNumber": "3001234567",
     }

     response = await client.post(path, json=body, headers=headers)
     assert response.status_code == 400
     assert response.json() == {"error": "total: must be at most 2147483647"}
     assert _bill_count(database) == 0


@pytest.mark.asyncio
async def test_ids_beyond_storage_range_are_not_found(client: AsyncClient, landlord) -> None:
     _, headers = landlord
     huge = "99999999999999999999"

     response = await client.patch(f"/api/bills/{huge}", headers=headers)
     assert response.status_code == 404
     assert response.json() == {"error": "Bill not found"}

     response = await client.delete(f"/api/bills/{huge}", headers=headers)
     assert response.status_code == 404

     response = await client.get(f"/api/bills/{huge}/whatsapp", headers=headers)
     assert response.status_code == 404

     response = await client.post(
          "/api/bills",
          json={"profileId": 10**20, "rent": 15000, "contactNumber": "3001234567"},
          headers=headers,
     )
     assert response.status_code == 404
     assert response.json() == {"error": "Profile not found"}

     response = await client.get("/api/bills", params={"profileId": huge}, headers=headers)
     assert response.status_code == 200
     assert response.json() == []


# ---------------------------------------------------------------------------
# List
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_list_bills_caps_at_five_newest(client: AsyncClient, landlord) -> None:
     _, headers = landlord
     profile = await _create_profile(client, headers)
     created = []
     for i in range(7):
          response = await client.post(
               "/api/bills",
               json={"profileId": profile["id"], "rent": 1000 + i, "contactNumber": "3001234567"},
               headers=headers,
          )
          created.append(response.json()["id"])

     response = await client.get("/api/bills", params={"profileId": profile["id"]}, headers=headers)
     assert response.status_code == 200
     assert [b["id"] for b in response.json()] == list(reversed(created))[:5]


@pytest.mark.asyncio
async def test_list_bills_requires_profile_id(client: AsyncClient, landlord) -> None:
     _, headers = landlord
     response = await client.get("/api/bills", headers=headers)
     assert response.status_code == 400
     assert response.json() == {"error": "Profile ID is required"}


@pytest.mark.asyncio
async def test_list_bills_of_foreign_profile_is_empty(client: AsyncClient, landlord, other_landlord) -> None:
     _, headers = landlord
     _, other_headers = other_landlord
     profile = await _create_profile(client, headers)
     await client.post(
          "/api/bills",
          json={"profileId": profile["id"], "rent": 15000, "contactNumber": "3001234567"},
          headers=headers,
     )

     response = await client.get("/api/bills", params={"profileId": profile["id"]}, headers=other_headers)
     assert response.status_code == 200
     assert response.json() == []


# ---------------------------------------------------------------------------
# Toggle / delete
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_toggle_flips_status_back_and_forth(client: AsyncClient, landlord) -> None:
     _, headers = landlord
     profile = await _create_profile(client, headers)
     bill = (await client.post(
          "/api/bills",
          json={"profileId": profile["id"], "rent": 15000, "electric": 500, "contactNumber": "3001234567"},
          headers=headers,
     )).json()

     paid = await client.patch(f"/api/bills/{bill['id']}", headers=headers)
     assert paid.status_code == 200
     assert paid.json()["status"] == "paid"
     assert paid.json()["total"] == 15500

     pending = await client.patch(f"/api/bills/{bill['id']}", headers=headers)
     assert pending.json()["status"] == "pending"


@pytest.mark.asyncio
async def test_other_landlord_cannot_toggle_or_delete_bill(client: AsyncClient, landlord, other_landlord) -> None:
     _, headers = landlord
     _, other_headers = other_landlord
     profile = await _create_profile(client, headers)
     bill = (await client.post(
          "/api/bills",
          json={"profileId": profile["id"], "rent": 15000, "contactNumber": "3001234567"},
          headers=headers,
     )).json()
     url = f"/api/bills/{bill['id']}"

     for response in (
          await client.patch(url, headers=other_headers),
          await client.delete(url, headers=other_headers),
          await client.get(f"{url}/whatsapp", headers=other_headers),
     ):
          assert response.status_code == 404
          assert response.json() == {"error": "Bill not found"}

     missing = await client.patch("/api/bills/9999", headers=headers)
     assert missing.json() == {"error": "Bill not found"}

     listing = await client.get("/api/bills", params={"profileId": profile["id"]}, headers=headers)
     assert listing.json()[0]["status"] == "pending"


@pytest.mark.asyncio
async def test_delete_bill_then_delete_again(client: AsyncClient, landlord) -> None:
     _, headers = landlord
     profile = await _create_profile(client, headers)
     bill = (await client.post(
          "/api/bills",
          json={"profileId": profile["id"], "rent": 15000, "contactNumber": "3001234567"},
          headers=headers,
     )).json()

     response = await client.delete(f"/api/bills/{bill['id']}", headers=headers)
     assert response.status_code == 200
     assert response.json() == {"message": "Bill deleted successfully"}

     again = await client.delete(f"/api/bills/{bill['id']}", headers=headers)
     assert again.status_code == 404


# ---------------------------------------------------------------------------
# WhatsApp
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_whatsapp_link_for_stored_bill(client: AsyncClient, landlord) -> None:
     _, headers = landlord
     profile = await _create_profile(client, headers, name="Sara")
     bill = (await client.post(
          "/api/bills",
          json={
               "profileId": profile["id"],
               "rent": 15000,
               "customFields": [{"name": "Internet", "amount": 2000}],
               "contactNumber": "3001234567",
          },
          headers=headers,
     )).json()
     await client.patch(f"/api/bills/{bill['id']}", headers=headers)

     response = await client.get(f"/api/bills/{bill['id']}/whatsapp", headers=headers)
     assert response.status_code == 200
     link = response.json()

     assert link["phone"] == "+923001234567"
     assert link["message"].startswith("Bill Details for Sara:")
     assert "Internet: PKR 2000" in link["message"]
     assert "Total: PKR 17000" in link["message"]
     assert "Status: Paid" in link["message"]
     assert parse_qs(urlparse(link["url"]).query)["text"][0] == link["message"]


@pytest.mark.asyncio
async def test_preview_computes_total_without_saving(client: AsyncClient, landlord, database) -> None:
     _, headers = landlord
     profile = await _create_profile(client, headers)

     response = await client.post(
          "/api/bills/preview",
          json={
               "profileId": profile["id"],
               "rent": 20000,
               "electric": 1500,
               "gas": 800,
               "water": 300,
               "customFields": [{"name": "Internet", "amount": 2000}],
               "contactNumber": "+923001234567",
          },
          headers=headers,
     )
     assert response.status_code == 200
     preview = response.json()

     assert preview["total"] == 24600
     assert preview["phone"] == "+923001234567"
     assert "Status: Pending" in preview["message"]
     assert _bill_count(database) == 0


# ---------------------------------------------------------------------------
# End to end
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_landlord_flow_end_to_end(client: AsyncClient, landlord) -> None:
     _, headers = landlord

     created = await client.post(
          "/api/profiles",
          json={"tenantName": "Ali", "contactNumber": "03001234567"},
          headers=headers,
     )
     assert created.status_code == 201
     profile_id = created.json()["id"]

     bill_response = await client.post(
          "/api/bills",
          json={"profileId": profile_id, "rent": "15000", "contactNumber": "3001234567"},
          headers=headers,
     )
     assert bill_response.status_code == 201
     bill = bill_response.json()
     assert bill["total"] == 15000
     assert bill["status"] == "pending"

     toggled = await client.patch(f"/api/bills/{bill['id']}", headers=headers)
     assert toggled.json()["status"] == "paid"

     deleted = await client.delete(f"/api/profiles/{profile_id}", headers=headers)
     assert deleted.status_code == 200

     listing = await client.get("/api/bills", params={"profileId": profile_id}, headers=headers)
     assert listing.status_code == 200
     assert listing.json() == []
