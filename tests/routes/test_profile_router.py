"""End-to-end tests for the profile page and its JSON twin."""
from __future__ import annotations

from datetime import timedelta

from app.auth import create_access_token

from factories import auth_headers, block, follow, make_post, make_user, session_cookie


def test_profile_page_renders_header_counts_and_feed(client, db, alice, bob, carol):
    make_post(db, alice, "Down the rabbit hole", minutes_ago=5)
    make_post(db, alice, "Tea party", minutes_ago=1)
    follow(db, bob, alice)
    follow(db, carol, alice)
    follow(db, alice, bob)

    resp = client.get("/profile/alice", headers=auth_headers(bob.id))

    assert resp.status_code == 200
    html = resp.text
    assert "Alice Liddell" in html
    assert 'src="https://cdn.example.com/alice-cover.png"' in html
    assert 'src="https://cdn.example.com/alice.png"' in html
    assert '<span class="count" data-stat="posts">2</span>' in html
    assert '<span class="count" data-stat="followers">2</span>' in html
    assert '<span class="count" data-stat="followings">1</span>' in html
    assert html.index("Tea party") < html.index("Down the rabbit hole")
    assert 'data-username="alice"' in html
    assert 'data-type="profile"' in html
    assert "Living in <b>Oxford</b>" in html
    assert '<span class="following">Following</span>' in html


def test_profile_page_placeholders_and_username_fallback(client, carol):
    resp = client.get("/profile/carol")

    assert resp.status_code == 200
    assert '<h1 class="display-name">carol</h1>' in resp.text
    assert 'src="/noAvatar.png"' in resp.text
    assert 'src="/noCover.png"' in resp.text
    assert "No posts found!" in resp.text


def test_unknown_user_is_not_found_for_any_viewer(client, bob):
    anonymous = client.get("/profile/ghost")
    signed_in = client.get("/profile/ghost", headers=auth_headers(bob.id))

    assert anonymous.status_code == 404
    assert signed_in.status_code == 404
    assert "Not found" in anonymous.text


def test_blocked_viewer_sees_the_not_found_page(client, db, alice, bob):
    block(db, alice, bob)

    blocked = client.get("/profile/alice", headers=auth_headers(bob.id))
    missing = client.get("/profile/ghost", headers=auth_headers(bob.id))

    assert blocked.status_code == 404
    assert blocked.text == missing.text
    assert "alice" not in blocked.text.lower()


def test_block_is_honoured_for_session_cookie(client, db, alice, bob):
    block(db, alice, bob)
    client.cookies.update(session_cookie(bob.id))

    resp = client.get("/profile/alice")

    assert resp.status_code == 404


def test_anonymous_viewer_is_not_affected_by_blocks(client, db, alice, bob):
    block(db, alice, bob)

    assert client.get("/profile/alice").status_code == 200


def test_invalid_token_is_treated_as_anonymous(client, db, alice, bob):
    block(db, alice, bob)

    resp = client.get("/profile/alice", headers={"Authorization": "Bearer not-a-jwt"})

    assert resp.status_code == 200


def test_expired_token_is_treated_as_anonymous(client, db, alice, bob):
    block(db, alice, bob)
    expired = create_access_token({"sub": bob.id}, expires_delta=timedelta(minutes=-5))

    resp = client.get("/profile/alice", headers={"Authorization": f"Bearer {expired}"})

    assert resp.status_code == 200


def test_api_profile_returns_display_data(client, db, alice, bob):
    make_post(db, alice, "hello")
    follow(db, bob, alice)

    resp = client.get("/api/profile/alice")

    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == alice.id
    assert body["display_name"] == "Alice Liddell"
    assert body["post_count"] == 1
    assert body["follower_count"] == 1
    assert body["following_count"] == 0
    assert body["city"] == "Oxford"


def test_api_profile_hides_blocked_and_missing_identically(client, db, alice, bob):
    block(db, alice, bob)

    blocked = client.get("/api/profile/alice", headers=auth_headers(bob.id))
    missing = client.get("/api/profile/ghost", headers=auth_headers(bob.id))

    assert blocked.status_code == missing.status_code == 404
    assert blocked.json() == missing.json() == {"detail": "Not found"}


def test_health_check(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.json() == {"message": "Social profile API is running!"}


def test_info_card_links_only_http_websites(client, db):
    make_user(db, "user_mallory", "mallory", website="javascript:alert(1)")
    make_user(db, "user_dave", "dave", website="https://dave.example.com")

    unsafe = client.get("/profile/mallory")
    safe = client.get("/profile/dave")

    assert unsafe.status_code == 200
    assert "javascript:" not in unsafe.text
    assert 'href="https://dave.example.com"' in safe.text


def test_info_card_shows_block_status_as_label(client, db, alice, bob):
    block(db, bob, alice)

    resp = client.get("/profile/alice", headers=auth_headers(bob.id))

    assert '<span class="blocked">Blocked</span>' in resp.text
    assert "Unblock User" not in resp.text
