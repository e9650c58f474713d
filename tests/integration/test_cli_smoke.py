import json
from pathlib import Path

import pytest

from colomap.cli import parse_args, run_command
from colomap.common.constants import EXIT_HARD_FAIL, EXIT_SUCCESS, LOCATIONS_URL, STATUS_PAGE_URL


def _args(tmp_path: Path, *extra: str):
    return parse_args(
        [
            "--output",
            str(tmp_path / "out" / "colos.json"),
            "--config-dir",
            "config",
            "--run-id",
            "run-test",
            *extra,
        ]
    )


@pytest.mark.integration
def test_cli_writes_sorted_enriched_output(tmp_path: Path, fake_http_client):
    exit_code = run_command(_args(tmp_path), http_client=fake_http_client)

    assert exit_code == EXIT_SUCCESS
    assert fake_http_client.calls == [STATUS_PAGE_URL, LOCATIONS_URL]
    payload = json.loads((tmp_path / "out" / "colos.json").read_text(encoding="utf-8"))
    assert [row["iata"] for row in payload] == ["TNR", "BHY", "JHB", "AMS", "ORK", "MXP"]
    assert payload[1] == {
        "name": "Beihai, China",
        "continent": "Asia",
        "iata": "BHY",
        "lat": 21.48,
        "lon": 109.12,
        "cca2": "CN",
        "region": "Asia",
        "city": "Beihai",
    }
    assert payload[4] == {"name": "Cork, Ireland", "continent": "Europe", "iata": "ORK"}
    assert all(row["continent"] != "Cloudflare Sites and Services" for row in payload)


@pytest.mark.integration
def test_cli_single_site_scenario(tmp_path: Path, http_client_factory):
    status_page = (
        b'<html><body><div class="component-container">'
        b'<div class="component-inner-container"><span class="name"><span>Asia</span>'
        b'<span class="font-small">1</span></span></div>'
        b'<div class="child-components-container"><div class="component-inner-container">'
        b'<span class="name">Beihai, China - (BHY)</span></div></div>'
        b"</div></body></html>"
    )
    locations = b'[{"iata":"BHY","lat":21.48,"lon":109.12,"cca2":"CN","region":"Asia","city":"Beihai"}]'
    client = http_client_factory({STATUS_PAGE_URL: status_page, LOCATIONS_URL: locations})

    assert run_command(_args(tmp_path), http_client=client) == EXIT_SUCCESS

    payload = json.loads((tmp_path / "out" / "colos.json").read_text(encoding="utf-8"))
    assert payload == [
        {
            "name": "Beihai, China",
            "continent": "Asia",
            "iata": "BHY",
            "lat": 21.48,
            "lon": 109.12,
            "cca2": "CN",
            "region": "Asia",
            "city": "Beihai",
        }
    ]


@pytest.mark.integration
def test_cli_unexpected_status_fails_without_output(tmp_path: Path, fixture_bodies, http_client_factory):
    client = http_client_factory(fixture_bodies, statuses={LOCATIONS_URL: 503})

    exit_code = run_command(_args(tmp_path), http_client=client)

    assert exit_code == EXIT_HARD_FAIL
    assert not (tmp_path / "out" / "colos.json").exists()


@pytest.mark.integration
def test_cli_malformed_locations_fails_and_keeps_existing_output(tmp_path: Path, fixture_bodies, http_client_factory):
    out_path = tmp_path / "out" / "colos.json"
    out_path.parent.mkdir()
    out_path.write_text("previous", encoding="utf-8")
    fixture_bodies[LOCATIONS_URL] = b"{not json"

    exit_code = run_command(_args(tmp_path), http_client=http_client_factory(fixture_bodies))

    assert exit_code == EXIT_HARD_FAIL
    assert out_path.read_text(encoding="utf-8") == "previous"


@pytest.mark.integration
def test_cli_strict_mode_fails_on_parse_warnings(tmp_path: Path, fake_http_client):
    exit_code = run_command(_args(tmp_path, "--strict"), http_client=fake_http_client)

    assert exit_code == EXIT_HARD_FAIL
    assert not (tmp_path / "out" / "colos.json").exists()


@pytest.mark.integration
def test_cli_invalid_config_fails(tmp_path: Path, fake_http_client):
    config_dir = tmp_path / "cfg"
    config_dir.mkdir()
    (config_dir / "colomap.yml").write_text("http:\n  timeout:\n    read: -1\n", encoding="utf-8")

    exit_code = run_command(_args(tmp_path, "--config-dir", str(config_dir)), http_client=fake_http_client)

    assert exit_code == EXIT_HARD_FAIL
    assert fake_http_client.calls == []


@pytest.mark.integration
def test_cli_rejects_non_finite_coordinates_without_output(tmp_path: Path, fixture_bodies, http_client_factory):
    fixture_bodies[LOCATIONS_URL] = b'[{"iata":"BHY","lat":NaN,"lon":Infinity,"cca2":"CN","region":"Asia","city":"Beihai"}]'

    exit_code = run_command(_args(tmp_path), http_client=http_client_factory(fixture_bodies))

    assert exit_code == EXIT_HARD_FAIL
    assert not (tmp_path / "out" / "colos.json").exists()
