from app.services.query.query_engine import QueryFields, number_key, text_key

# Sort keys use the camelCase names accepted on the query string.
PROJECT_FIELDS = QueryFields(
    exact=("energy_type", "status"),
    contains=("location",),
    search=("name", "owner", "location"),
    sort_keys={
        "name": text_key("name"),
        "owner": text_key("owner"),
        "energyType": text_key("energy_type"),
        "capacity": number_key("capacity"),
        "location": text_key("location"),
        "status": text_key("status"),
        "year": number_key("year"),
    },
)

USER_FIELDS = QueryFields(
    exact=("role",),
    search=("name", "email"),
    sort_keys={
        "name": text_key("name"),
        "email": text_key("email"),
        "role": text_key("role"),
    },
)
