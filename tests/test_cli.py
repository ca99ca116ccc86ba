from polycubes.cli import main

def test_generate(tmp_path, capsys):
	assert main(['-n', '4', '--threads', '0', '--cache-dir', str(tmp_path)]) == 0
	out = capsys.readouterr().out
	assert 'generated 8 unique polycubes of size 4' in out
	assert 'maximum dimension: 4' in out
	assert 'matches' in out
	assert (tmp_path / 'cubes_4.json.gz').is_file()

def test_generate_without_cache(tmp_path, capsys, monkeypatch):
	monkeypatch.chdir(tmp_path)
	assert main(['-n', '3', '--threads', '0', '--no-cache', '--hash-signatures']) == 0
	out = capsys.readouterr().out
	assert 'generated 2 unique polycubes' in out
	assert 'maximum dimension: 3' in out
	assert list(tmp_path.iterdir()) == []

def test_count_free(capsys):
	assert main(['-n', '6', '--count', '--symmetry']) == 0
	assert 'counted 166 free polycubes of size 6' in capsys.readouterr().out

def test_rejects_bad_size(capsys):
	assert main(['-n', '0']) == 1
	assert 'usage' in capsys.readouterr().out

def test_rejects_negative_threads(capsys):
	assert main(['-n', '3', '--threads', '-2']) == 1
