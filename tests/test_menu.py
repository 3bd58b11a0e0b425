import io

from algocollection.menu import main


def run(monkeypatch, capsys, script):
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    code = main([])
    return code, capsys.readouterr().out


def test_create_and_display(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "1\n3\n10\n20\n30\n9\n10\n")
    assert code == 0
    assert "10 -> 20 -> 30 -> " in out


def test_length(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, "1\n2\n5\n6\n2\n10\n")
    assert "Length of linked list is : 2" in out


def test_insert_front_end_and_position(monkeypatch, capsys):
    script = "4\n2\n3\n1\n5\n2\n9\n9\n10\n"
    _, out = run(monkeypatch, capsys, script)
    assert "1 -> 9 -> 2 -> " in out


def test_invalid_insert_position(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, "5\n3\n9\n10\n")
    assert "Invalid Position." in out
    assert "Linked list is Empty" in out


def test_delete_first_and_last(monkeypatch, capsys):
    script = "1\n3\n4\n5\n6\n6\n7\n9\n10\n"
    _, out = run(monkeypatch, capsys, script)
    assert "First node is 4 Deleted" in out
    assert "last node is 6 Deleted" in out
    assert "5 -> " in out


def test_delete_at_position(monkeypatch, capsys):
    script = "1\n3\n4\n5\n6\n8\n2\n9\n10\n"
    _, out = run(monkeypatch, capsys, script)
    assert "Position 2 node is 5 Deleted" in out
    assert "4 -> 6 -> " in out


def test_delete_from_empty(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, "6\n7\n8\n10\n")
    assert out.count("Linked List is Empty.") == 2
    assert "Linked List is already Empty." in out


def test_delete_invalid_position(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, "4\n1\n8\n5\n10\n")
    assert "Invalid Position" in out


def test_invalid_choice(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, "42\n10\n")
    assert "Invalid Choice, Please Enter correct Choice." in out


def test_non_integer_is_reprompted(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, "abc\n4\n7\n9\n10\n")
    assert "Please enter an integer." in out
    assert "7 -> " in out


def test_end_of_input_exits(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "4\n3\n")
    assert code == 0
    assert "Inserted Successfully." in out