import pytest

from domotica.rules import Processor, Rule


def test_rule_default_y():
    rule = Rule("maior_que", 1, 30)
    assert rule.y == 0
    assert rule.x == 30


def test_process_rules_empty():
    assert Processor(1, "liga").process_rules() is False


@pytest.mark.parametrize(
    "kind", ["igual_a", "menor_que", "maior_que", "entre", "fora"]
)
def test_process_rules_known(kind):
    proc = Processor(1, "liga")
    proc.add_rule(Rule(kind, 1, 5))
    assert proc.process_rules() is True


def test_process_rules_unknown_first():
    proc = Processor(1, "liga")
    proc.add_rule(Rule("desconhecida", 1, 5))
    proc.add_rule(Rule("igual_a", 2, 5))
    assert proc.process_rules() is False


def test_str_counts_rules():
    proc = Processor(3, "liga")
    proc.add_rule(Rule("igual_a", 1, 5))
    proc.add_rule(Rule("entre", 2, 5, 9))
    assert str(proc) == "ID: 3, regras: 2"


def test_set_command():
    proc = Processor(1, "liga")
    proc.set_command("desliga")
    assert proc.command == "desliga"


def test_rules_in_order():
    proc = Processor(1, "liga")
    rules = [Rule("igual_a", i, i) for i in range(1, 4)]
    for r in rules:
        proc.add_rule(r)
    assert [r.rule_id for r in proc.rules] == [1, 2, 3]