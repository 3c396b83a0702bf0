from circlist.demo import build_demo_list, main


def test_build_demo_list_contents():
    demo = build_demo_list()
    assert list(demo) == [5, 4, 2, 1]
    assert 3 not in list(demo)


def test_build_demo_list_is_consistent_backwards():
    demo = build_demo_list()
    assert list(reversed(demo)) == list(demo)[::-1]


def test_main_prints_render(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == build_demo_list().render() + "\n"
    assert out.endswith("(Head->next)\n")