"""Tests for the project, statistics and chart endpoints."""
import pytest

SOLAR = {
    "name": "Bhadla Solar Park",
    "owner": "Rajasthan Solar Park Development Company",
    "energyType": "solar",
    "capacity": 2245,
    "location": "Rajasthan, India",
    "status": "operational",
    "year": 2021,
    "latitude": 27.533,
    "longitude": 71.9084,
}
WIND = {
    "name": "Muppandal Wind Farm",
    "owner": "Tamil Nadu Energy Development Agency",
    "energyType": "wind",
    "capacity": 1500,
    "location": "Tamil Nadu, India",
    "status": "operational",
    "year": 2000,
}
HYDRO = {
    "name": "Brahmaputra Hydroelectric Project",
    "owner": "NHPC Limited",
    "energyType": "hydro",
    "capacity": 2800,
    "location": "Assam, India",
    "status": "planning",
    "year": 2027,
}


@pytest.fixture
async def seeded(client, admin_headers):
    created = []
    for payload in (SOLAR, WIND, HYDRO):
        resp = await client.post("/api/projects", headers=admin_headers, json=payload)
        assert resp.status_code == 201
        created.append(resp.json())
    return created


async def test_create_returns_camel_case_record(client, admin_headers):
    resp = await client.post("/api/projects", headers=admin_headers, json=SOLAR)
    body = resp.json()
    assert resp.status_code == 201
    assert body["_id"]
    assert body["energyType"] == "solar"
    assert body["capacity"] == 2245
    assert body["createdAt"]


@pytest.mark.parametrize(
    "change",
    [
        {"capacity": -1},
        {"energyType": "nuclear"},
        {"status": "cancelled"},
        {"name": ""},
        {"latitude": 91},
        {"longitude": -181},
    ],
)
async def test_create_rejects_invalid_records(client, admin_headers, project_store, change):
    resp = await client.post("/api/projects", headers=admin_headers, json={**SOLAR, **change})
    assert resp.status_code == 422
    assert await project_store.list() == []


async def test_list_filters_and_counts(client, viewer_headers, seeded):
    resp = await client.get("/api/projects", headers=viewer_headers, params={"status": "operational", "limit": 1})
    body = resp.json()
    assert resp.status_code == 200
    assert body["total"] == 2
    assert len(body["projects"]) == 1
    assert body["page"] == 1
    assert body["limit"] == 1


async def test_list_default_order_is_newest_first(client, viewer_headers, seeded):
    body = (await client.get("/api/projects", headers=viewer_headers)).json()
    assert [p["name"] for p in body["projects"]] == [HYDRO["name"], WIND["name"], SOLAR["name"]]


async def test_list_sorts_by_capacity(client, viewer_headers, seeded):
    params = {"sortBy": "capacity", "sortOrder": "desc"}
    body = (await client.get("/api/projects", headers=viewer_headers, params=params)).json()
    assert [p["capacity"] for p in body["projects"]] == [2800, 2245, 1500]


@pytest.mark.parametrize(
    "params",
    [
        {"sortBy": "createdAt"},
        {"sortOrder": "up"},
        {"page": "0"},
        {"limit": "101"},
        {"limit": "ten"},
        {"owner": "NHPC"},
    ],
)
async def test_list_rejects_bad_specifications(client, viewer_headers, seeded, params):
    resp = await client.get("/api/projects", headers=viewer_headers, params=params)
    assert resp.status_code == 400


async def test_get_update_delete_lifecycle(client, admin_headers, viewer_headers, seeded):
    project_id = seeded[0]["_id"]

    got = await client.get(f"/api/projects/{project_id}", headers=viewer_headers)
    assert got.json()["name"] == SOLAR["name"]

    updated = await client.put(f"/api/projects/{project_id}", headers=admin_headers, json={"status": "decommissioned"})
    assert updated.status_code == 200
    assert updated.json()["status"] == "decommissioned"
    assert updated.json()["owner"] == SOLAR["owner"]
    assert updated.json()["createdAt"] == seeded[0]["createdAt"]

    deleted = await client.delete(f"/api/projects/{project_id}", headers=admin_headers)
    assert deleted.status_code == 200
    assert (await client.get(f"/api/projects/{project_id}", headers=viewer_headers)).status_code == 404


async def test_unknown_project_is_404(client, admin_headers):
    assert (await client.get("/api/projects/missing", headers=admin_headers)).status_code == 404
    assert (await client.put("/api/projects/missing", headers=admin_headers, json={"year": 2030})).status_code == 404
    assert (await client.delete("/api/projects/missing", headers=admin_headers)).status_code == 404


async def test_update_rejects_negative_capacity(client, admin_headers, seeded):
    resp = await client.put(f"/api/projects/{seeded[0]['_id']}", headers=admin_headers, json={"capacity": -5})
    assert resp.status_code == 422


async def test_update_clears_coordinates_with_null(client, admin_headers, viewer_headers, seeded):
    project_id = seeded[0]["_id"]
    assert seeded[0]["latitude"] == SOLAR["latitude"]

    resp = await client.put(f"/api/projects/{project_id}", headers=admin_headers,
                            json={"latitude": None, "longitude": None})
    assert resp.status_code == 200
    assert resp.json()["latitude"] is None
    assert resp.json()["longitude"] is None
    assert resp.json()["name"] == SOLAR["name"]

    got = (await client.get(f"/api/projects/{project_id}", headers=viewer_headers)).json()
    assert got["latitude"] is None
    assert got["capacity"] == SOLAR["capacity"]


@pytest.mark.parametrize("field", ["name", "owner", "energyType", "capacity", "location", "status", "year"])
async def test_update_rejects_null_for_required_fields(client, admin_headers, viewer_headers, seeded, field):
    project_id = seeded[0]["_id"]
    resp = await client.put(f"/api/projects/{project_id}", headers=admin_headers, json={field: None})
    assert resp.status_code == 422

    got = (await client.get(f"/api/projects/{project_id}", headers=viewer_headers)).json()
    assert got[field] == SOLAR[field]


async def test_stats(client, viewer_headers, seeded):
    body = (await client.get("/api/stats", headers=viewer_headers)).json()
    assert body["totalProjects"] == 3
    assert body["totalCapacity"] == 2245 + 1500 + 2800
    assert body["activeLocations"] == 3
    assert body["operational"] == 2
    assert set(body["percentageChanges"]) == {"projects", "capacity", "locations", "operational"}


async def test_stats_fail_on_corrupt_capacity(client, viewer_headers, project_store):
    await project_store.create({"name": "bad", "energy_type": "solar", "capacity": "n/a", "location": "X", "status": "planning"})
    assert (await client.get("/api/stats", headers=viewer_headers)).status_code == 500


async def test_stats_on_empty_collection(client, viewer_headers):
    body = (await client.get("/api/stats", headers=viewer_headers)).json()
    assert body["totalProjects"] == 0
    assert body["totalCapacity"] == 0


async def test_charts(client, viewer_headers, seeded):
    body = (await client.get("/api/charts", headers=viewer_headers)).json()
    assert body["capacityTrends"]
    shares = {item["type"]: item for item in body["energyDistribution"]}
    assert {t: s["percentage"] for t, s in shares.items()} == {"solar": 33, "wind": 33, "hydro": 33}
    assert shares["solar"]["color"] == "#FF9800"
