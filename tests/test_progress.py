from kdd_rule_miner.utils.progress import progress


def test_progress_yields_every_item():
    assert list(progress(range(5), desc="generations", unit="gen", disable=True)) == [0, 1, 2, 3, 4]
