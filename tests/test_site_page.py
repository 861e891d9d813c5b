import pytest

from portfolio_site import content


@pytest.mark.web
def test_page_has_every_section_in_order(site_client, soup):
    r = site_client.get("/")
    assert r.status_code == 200
    s = soup(r.data)
    ids = [sec["id"] for sec in s.select("main > section")]
    assert ids == ["home", "about", "skills", "projects", "contact"]
    assert content.PROFILE["name"] in s.title.text


@pytest.mark.web
def test_static_content_is_rendered(site_client, soup):
    s = soup(site_client.get("/").data)
    text = s.get_text(" ")
    for stat in content.STATS:
        assert stat["label"] in text
    for cat in content.SKILL_CATEGORIES:
        assert cat["title"] in text
    assert len(s.select('[data-testid="featured-project"]')) == 2
    assert len(s.select('[data-testid="project"]')) == 4
    assert "95%" in text


@pytest.mark.web
def test_reveal_settings_are_exposed_on_sections(site_client, soup):
    s = soup(site_client.get("/").data)
    about = s.select_one("#about")
    assert about["data-reveal-amount"] == "0.3"
    assert about["data-reveal-once"] == "true"


@pytest.mark.web
def test_section_markup_comes_from_the_reveal_observer(site_client, soup, monkeypatch):
    from portfolio_site import reveal, site as site_mod

    def custom():
        obs = reveal.observer_for_sections()
        obs.observe("skills", threshold=0.75, once=False)
        return obs

    monkeypatch.setattr(site_mod, "observer_for_sections", custom)
    s = soup(site_client.get("/").data)
    assert s.select_one("#skills")["data-reveal-amount"] == "0.75"
    assert s.select_one("#skills")["data-reveal-once"] == "false"
    assert s.select_one("#about")["data-reveal-amount"] == "0.3"


@pytest.mark.web
def test_contact_form_posts_to_api(site_client, soup):
    s = soup(site_client.get("/").data)
    form = s.select_one('[data-testid="contact-form"]')
    assert form["action"] == "http://api.test/api/contact"
    assert {i["name"] for i in form.select("input, textarea")} == {"name", "email", "subject", "message"}


@pytest.mark.theme
def test_default_is_light_and_client_hint_picks_dark(site_client, soup):
    light = soup(site_client.get("/").data)
    assert light.html["class"] == ["light"]

    dark = soup(site_client.get("/", headers={"Sec-CH-Prefers-Color-Scheme": "dark"}).data)
    assert dark.html["class"] == ["dark"]


@pytest.mark.theme
def test_theme_toggle_persists_in_cookie(site_client, soup):
    r = site_client.post("/theme")
    assert r.status_code == 303
    assert "darkMode=true" in r.headers["Set-Cookie"]

    s = soup(site_client.get("/").data)
    assert s.html["class"] == ["dark"]

    site_client.post("/theme")
    assert soup(site_client.get("/").data).html["class"] == ["light"]


@pytest.mark.starfield
def test_starfield_svg_follows_theme(site_client):
    r = site_client.get("/starfield.svg?width=300&height=200&seed=4")
    assert r.status_code == 200
    assert r.headers["Content-Type"].startswith("image/svg+xml")
    body = r.data.decode()
    assert 'width="300"' in body and body.count("<circle") == 150
    assert 'fill="#1e3a8a"' in body

    site_client.post("/theme")
    dark = site_client.get("/starfield.svg?width=300&height=200&seed=4").data.decode()
    assert 'fill="#ffffff"' in dark


@pytest.mark.starfield
def test_starfield_svg_clamps_bad_params(site_client):
    r = site_client.get("/starfield.svg?width=abc&height=99999&frames=-3")
    assert r.status_code == 200
    body = r.data.decode()
    assert 'width="1280"' in body and 'height="2160"' in body


@pytest.mark.integration
def test_page_form_submission_reaches_api(site_client, soup, client, store):
    s = soup(site_client.get("/").data)
    names = [i["name"] for i in s.select('[data-testid="contact-form"] input, [data-testid="contact-form"] textarea')]
    payload = dict(zip(names, ["Grace", "grace@mail.com", "Compilers", "Let us talk about COBOL."]))
    r = client.post("/api/contact", data=payload)
    assert r.status_code == 200
    assert store.saved[0].subject == "Compilers"
    listed = client.get("/api/contacts").json
    assert listed["count"] == 1 and listed["data"][0]["name"] == "Grace"


@pytest.mark.starfield
def test_hero_backdrop_advances_the_same_sky(soup):
    from urllib.parse import parse_qs, urlsplit

    from portfolio_site.site import create_site

    site = create_site({"TESTING": True, "BACKDROP_SEED": 7, "BACKDROP_FRAMES": 2, "BACKDROP_STEP": 30})
    c = site.test_client()
    img = soup(c.get("/").data).select_one('[data-testid="starfield"]')
    assert (img["data-seed"], img["data-frames"], img["data-step"]) == ("7", "2", "30")
    assert parse_qs(urlsplit(img["src"]).query) == {"seed": ["7"], "frames": ["2"]}

    first = c.get(img["src"]).data
    again = c.get(img["src"]).data
    later = c.get("/starfield.svg?seed=7&frames=32").data
    assert first == again
    assert later != first
    assert later.count(b"<circle") == first.count(b"<circle") == 150


@pytest.mark.starfield
def test_each_page_view_gets_its_own_seed(site_client, soup):
    seeds = {soup(site_client.get("/").data).select_one('[data-testid="starfield"]')["data-seed"] for _ in range(3)}
    assert all(s.isdigit() for s in seeds)
    assert len(seeds) > 1
