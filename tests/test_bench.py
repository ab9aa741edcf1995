import bench


def test_run_benchmark_covers_every_strategy(dictionary, word_set):
    results = bench.run_benchmark(dictionary, word_set, rounds=1)
    assert set(results) == {'perfect_hash', 'builtin_set', 'binary_search'}
    assert all(seconds >= 0 for seconds in results.values())


def test_main_prints_results(capsys):
    assert bench.main(['--rounds', '1']) == 0
    out = capsys.readouterr().out
    assert 'perfect_hash' in out
    assert 'binary_search' in out
