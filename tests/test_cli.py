from moonshot.cli import main, start_match_service


def test_start_match_service():
    assert start_match_service() is True


def test_main_announces_service(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Service Started\n"


def test_main_ignores_arguments(capsys):
    assert main(["--anything", "value"]) == 0
    assert "Service Started" in capsys.readouterr().out