"""Tests for the gke-guestbook-render CLI."""

from unittest.mock import MagicMock, patch

import pytest
import yaml

from gke_guestbook import render


def _run(argv):
    with pytest.raises(SystemExit) as exc:
        render.main(argv)
    return exc.value.code


def test_kubeconfig_command(capsys):
    code = _run(["kubeconfig", "--project", "proj", "--zone", "zone", "--name", "foo",
                 "--endpoint", "1.2.3.4", "--ca-data", "ABCD"])
    out = capsys.readouterr().out
    assert code == 0
    assert "server: https://1.2.3.4" in out
    assert "certificate-authority-data: ABCD" in out
    assert "name: proj_zone_foo" in out


def test_manifest_command_transforms_every_object(capsys, guestbook_path):
    code = _run(["manifest", "--file", guestbook_path, "--namespace", "helloworld-ns"])
    captured = capsys.readouterr()
    assert code == 0
    objects = list(yaml.safe_load_all(captured.out))
    assert len(objects) == 4
    for obj in objects:
        assert obj["metadata"]["labels"]

    by_name = {(o["kind"], o["metadata"]["name"]): o for o in objects}
    assert by_name[("Service", "frontend")]["spec"]["type"] == "LoadBalancer"
    assert "type" not in by_name[("Service", "redis-leader")]["spec"]
    # unlabelled Deployment receives the default app labels
    assert by_name[("Deployment", "redis-leader")]["metadata"]["labels"] == {"appClass": "helloworld"}
    assert by_name[("Deployment", "frontend")]["metadata"]["labels"] == {
        "app": "guestbook", "appClass": "helloworld-ns",
    }
    assert "Loaded 4 objects" in captured.err
    assert "Service/frontend -> LoadBalancer" in captured.err


def test_manifest_command_empty_manifest(tmp_path, capsys):
    empty = tmp_path / "empty.yaml"
    empty.write_text("---\n---\n")
    assert _run(["manifest", "--file", str(empty)]) == 1
    assert "nothing to render" in capsys.readouterr().err


def test_transform_manifests_reports_changes():
    objects = [
        {"kind": "Service", "metadata": {"name": "frontend"}, "spec": {"type": "ClusterIP"}},
        {"kind": "Service", "metadata": {"name": "redis"}, "spec": {}},
    ]
    notes = render.transform_manifests(objects, "ns", {"appClass": "helloworld"})
    assert notes == ["Service/frontend -> LoadBalancer"]


def test_parse_manifest_skips_empty_documents():
    text = "---\nkind: Service\nmetadata:\n  name: a\n---\n\n---\nkind: Pod\nmetadata:\n  name: b\n"
    assert [o["kind"] for o in render.parse_manifest(text)] == ["Service", "Pod"]


def test_load_manifest_text_from_url():
    response = MagicMock()
    response.text = "kind: Service\n"
    with patch("gke_guestbook.render.requests.get", return_value=response) as get:
        text = render.load_manifest_text("https://example.com/guestbook.yaml")
    assert text == "kind: Service\n"
    get.assert_called_once_with("https://example.com/guestbook.yaml", timeout=render.FETCH_TIMEOUT)
    response.raise_for_status.assert_called_once()


def test_load_manifest_text_from_file(guestbook_path):
    assert "name: frontend" in render.load_manifest_text(guestbook_path)
