from ferrisplay.hello import main


def test_prints_greeting(capsys):
    assert main() == 0
    assert capsys.readouterr().out == "Hello, world!\n"