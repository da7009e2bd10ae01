def test_metrics_endpoint_exposes_prometheus_after_requests(client):
    # trigger a couple of requests
    r1 = client.get('/healthz')
    assert r1.status_code == 200
    r2 = client.get('/busy-time', params={'start': '2019-01-07'})
    assert r2.status_code == 200
    m = client.get('/metrics')
    assert m.status_code == 200
    body = m.text
    assert 'agenda_requests_total' in body
    assert 'path="/busy-time"' in body


def test_healthz_reports_calendar(client):
    r = client.get('/healthz')
    assert r.status_code == 200
    data = r.json()
    assert data['status'] == 'ok'
    assert 'calendarId' in data
    assert data['provider'] in ('google', 'unconfigured')


def test_bad_query_parameter_returns_422(client):
    r = client.get('/busy-time', params={'start': 'not-a-date'})
    assert r.status_code == 422


def test_healthz_reports_provider_from_settings(client):
    from agenda.config import Settings, get_settings
    from agenda.main import app

    app.dependency_overrides[get_settings] = lambda: Settings(google_token_file="token.json")
    r = client.get('/healthz')
    assert r.json()['provider'] == 'google'

    app.dependency_overrides[get_settings] = lambda: Settings(google_token_file=None, calendar_id="team")
    r = client.get('/healthz')
    assert r.json() == {'status': 'ok', 'calendarId': 'team', 'provider': 'unconfigured'}
