"""Tests for API routes."""

from invitations.engine import build_default_config


API = "/api/v1"


class TestHealthRoutes:
    """Tests for health check routes."""

    def test_health(self, client):
        """Health reports the number of block kinds."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["block_kinds"] == 10

    def test_request_id_header(self, client):
        """Logged requests echo the request id."""
        response = client.get(f"{API}/blocks", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"


class TestCatalogRoutes:
    """Tests for block and category catalog routes."""

    def test_list_blocks(self, client):
        """Blocks are listed in registration order."""
        response = client.get(f"{API}/blocks")
        assert response.status_code == 200
        assert [b["kind"] for b in response.json()][:3] == ["hero", "timeline", "location"]

    def test_get_block(self, client):
        """One block with its schema."""
        response = client.get(f"{API}/blocks/location")
        assert response.status_code == 200
        assert "address" in response.json()["payloadSchema"]["properties"]

    def test_get_unknown_block(self, client):
        """Unknown kinds are 404."""
        assert client.get(f"{API}/blocks/obsolete_block").status_code == 404

    def test_categories(self, client):
        """Categories come with their default schemes."""
        data = client.get(f"{API}/categories").json()
        assert data[0]["id"] == "wedding"
        assert data[0]["colorScheme"]["textLight"] == "#6B6B6B"

    def test_category_defaults(self, client):
        """Defaults match build_default_config."""
        response = client.get(f"{API}/categories/birthday/defaults")
        assert response.json() == build_default_config("birthday").to_document()


class TestInvitationRoutes:
    """Tests for the stateless engine routes."""

    def test_reconcile(self, client):
        """Malformed settings come back as defaults."""
        response = client.post(f"{API}/invitations/reconcile", json={"settings": [], "category": "corporate"})
        assert response.status_code == 200
        assert response.json() == build_default_config("corporate").to_document()

    def test_reconcile_default_category(self, client):
        """The configured default category is used when none is given."""
        response = client.post(f"{API}/invitations/reconcile", json={})
        assert response.json()["eventType"] == "wedding"

    def test_resolve(self, client, content):
        """Only enabled blocks are resolved, in order."""
        config = build_default_config("wedding").to_document()
        response = client.post(
            f"{API}/invitations/resolve",
            json={"config": config, "content": dict(content, gallery={"images": []})},
        )
        data = response.json()
        assert data[0]["kind"] == "hero"
        assert data[0]["payload"] == content["hero"]
        assert "gallery" not in [block["kind"] for block in data]
        assert "colorScheme" in data[0]

    def test_present(self, client):
        """Fallback content is derived from the event."""
        response = client.post(
            f"{API}/invitations/present",
            json={
                "config": build_default_config("wedding").to_document(),
                "event": {"title": "Ana & Luis", "location": "Puebla"},
            },
        )
        data = response.json()
        assert [block["kind"] for block in data] == ["hero", "location", "rsvp"]
        assert all(block["isFallback"] for block in data)


class TestEventRoutes:
    """Tests for per-event invitation routes."""

    def test_get_defaults_when_empty(self, client):
        """Events without settings get defaults and an empty content map."""
        response = client.get(f"{API}/events/evt_1/invitation", params={"category": "birthday"})
        assert response.status_code == 200
        data = response.json()
        assert data["eventType"] == "birthday"
        assert data["blockContent"] == {}

    def test_put_reconciles_and_stores(self, client, store):
        """Submitted documents are repaired before storage."""
        response = client.put(
            f"{API}/events/evt_1/invitation",
            json={
                "eventType": "wedding",
                "enabledBlocks": [{"type": "hero", "enabled": True, "order": 0}],
                "blockContent": {"hero": {"title": "Hi"}, "obsolete_block": {}},
            },
        )
        assert response.status_code == 200
        stored = store.get("evt_1")
        assert len(stored["enabledBlocks"]) == 10
        assert stored["blockContent"] == {"hero": {"title": "Hi"}}

    def test_toggle(self, client, store):
        """Toggling persists the change."""
        response = client.post(f"{API}/events/evt_1/invitation/toggle", json={"kind": "gallery"})
        assert response.status_code == 200
        gallery = next(b for b in store.get("evt_1")["enabledBlocks"] if b["type"] == "gallery")
        assert gallery["enabled"] is True

    def test_toggle_unknown_kind(self, client):
        """Unknown kinds leave the settings unchanged."""
        response = client.post(f"{API}/events/evt_1/invitation/toggle", json={"kind": "obsolete_block"})
        assert response.status_code == 200
        assert response.json()["enabledBlocks"] == build_default_config("wedding").to_document()["enabledBlocks"]

    def test_reorder(self, client):
        """Reordering swaps the two orders."""
        response = client.post(
            f"{API}/events/evt_1/invitation/reorder",
            json={"dragged": "hero", "target": "rsvp"},
        )
        orders = {b["type"]: b["order"] for b in response.json()["enabledBlocks"]}
        assert orders["hero"] == 5
        assert orders["rsvp"] == 0

    def test_event_type(self, client):
        """Changing the category resets the colors."""
        client.patch(f"{API}/events/evt_1/invitation/colors", json={"slot": "primary", "value": "#000000"})
        response = client.post(f"{API}/events/evt_1/invitation/event-type", json={"eventType": "corporate"})
        data = response.json()
        assert data["eventType"] == "corporate"
        assert data["colorScheme"]["primary"] == "#1E3A8A"

    def test_update_color(self, client):
        """One slot is edited."""
        response = client.patch(
            f"{API}/events/evt_1/invitation/colors",
            json={"slot": "textLight", "value": "#999999"},
        )
        assert response.status_code == 200
        assert response.json()["colorScheme"]["textLight"] == "#999999"

    def test_update_unknown_color_slot(self, client):
        """Unknown slots are rejected."""
        response = client.patch(
            f"{API}/events/evt_1/invitation/colors",
            json={"slot": "border", "value": "#000000"},
        )
        assert response.status_code == 422

    def test_block_content_and_render(self, client):
        """Stored content is returned by render."""
        response = client.put(
            f"{API}/events/evt_1/invitation/content/hero",
            json={"title": "Ana & Luis"},
        )
        assert response.status_code == 200

        rendered = client.get(f"{API}/events/evt_1/invitation/render").json()
        assert rendered[0]["kind"] == "hero"
        assert rendered[0]["payload"] == {"title": "Ana & Luis"}

    def test_content_unknown_kind(self, client):
        """Content for unknown kinds is 404."""
        response = client.put(f"{API}/events/evt_1/invitation/content/countdown", json={})
        assert response.status_code == 404

    def test_invalid_event_id(self, client):
        """Event ids must be safe identifiers."""
        assert client.get(f"{API}/events/bad id/invitation").status_code == 422


class TestEventCategory:
    """Per-event routes keep the event's own category."""

    def test_first_read_keeps_category_for_edits(self, client):
        """A birthday event stays a birthday after a toggle."""
        client.get(f"{API}/events/evt_b/invitation", params={"category": "birthday"})
        response = client.post(f"{API}/events/evt_b/invitation/toggle", json={"kind": "faq"})

        data = response.json()
        assert data["eventType"] == "birthday"
        assert data["colorScheme"]["primary"] == "#FF6B9D"
        faq = next(b for b in data["enabledBlocks"] if b["type"] == "faq")
        assert faq["enabled"] is True

    def test_toggle_with_category_query(self, client):
        """Editing an empty event uses the category query parameter."""
        response = client.post(
            f"{API}/events/evt_b/invitation/toggle",
            params={"category": "birthday"},
            json={"kind": "faq"},
        )
        assert response.json()["eventType"] == "birthday"

    def test_partial_stored_document_filled_from_its_event_type(self, client, store):
        """Missing blocks get the stored event type's enablement."""
        store.put("evt_b", {
            "eventType": "birthday",
            "enabledBlocks": [{"type": "hero", "enabled": True, "order": 0}],
        })
        response = client.post(
            f"{API}/events/evt_b/invitation/reorder",
            json={"dragged": "hero", "target": "rsvp"},
        )
        blocks = {b["type"]: b for b in response.json()["enabledBlocks"]}
        assert blocks["gallery"]["enabled"] is True
        assert blocks["story"]["enabled"] is False
        assert store.get("evt_b")["colorScheme"]["primary"] == "#FF6B9D"

    def test_put_uses_submitted_event_type(self, client, store):
        """A submitted birthday document is completed with birthday defaults."""
        response = client.put(
            f"{API}/events/evt_b/invitation",
            json={
                "eventType": "birthday",
                "enabledBlocks": [{"type": "hero", "enabled": True, "order": 0}],
            },
        )
        blocks = {b["type"]: b for b in response.json()["enabledBlocks"]}
        assert blocks["gallery"]["enabled"] is True
        assert response.json()["customStyles"]["fontFamily"] == "sans-serif"
        assert store.get("evt_b")["eventType"] == "birthday"

    def test_colors_and_content_keep_event_type(self, client, store):
        """Color and content edits on a corporate event keep it corporate."""
        store.put("evt_c", {"eventType": "corporate", "enabledBlocks": []})

        client.patch(f"{API}/events/evt_c/invitation/colors", json={"slot": "accent", "value": "#000000"})
        client.put(f"{API}/events/evt_c/invitation/content/faq", json={"questions": []})

        stored = store.get("evt_c")
        assert stored["eventType"] == "corporate"
        assert stored["colorScheme"]["primary"] == "#1E3A8A"
        assert stored["colorScheme"]["accent"] == "#000000"
        faq = next(b for b in stored["enabledBlocks"] if b["type"] == "faq")
        assert faq["enabled"] is True
