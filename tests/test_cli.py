import io

import pytest

from search_server.cli import build_server, main
from search_server.reader import read_input

INPUT = """and with
5
funny pet and nasty rat
3 7 2 7
funny pet with curly hair
3 1 2 3
big cat nasty hair
3 1 2 8
big dog cat Vladislav
3 1 3 2
big dog hamster Borya
3 1 1 1
"""


@pytest.fixture
def input_file(tmp_path):
    path = tmp_path / "documents.txt"
    path.write_text(INPUT, encoding="utf-8")
    return path


class TestReader:
    def test_read_input(self):
        server_input = read_input(io.StringIO(INPUT))
        assert server_input.stop_words == "and with"
        assert len(server_input.documents) == 5
        assert server_input.documents[1].id == 1
        assert server_input.documents[1].text == "funny pet with curly hair"
        assert server_input.documents[1].ratings == [1, 2, 3]

    def test_crlf_line_endings(self):
        server_input = read_input(io.StringIO("and\r\n1\r\ncat and dog\r\n0\r\n"))
        assert server_input.stop_words == "and"
        assert server_input.documents[0].text == "cat and dog"
        assert server_input.documents[0].ratings == []

    @pytest.mark.parametrize(
        "text",
        [
            "and\n2\ncat\n1 5\n",
            "and\nmany\n",
            "and\n1\ncat\n2 5\n",
            "and\n1\ncat\nfive\n",
        ],
    )
    def test_malformed(self, text):
        with pytest.raises(ValueError):
            read_input(io.StringIO(text))

    def test_build_server(self):
        search_server = build_server(io.StringIO(INPUT))
        assert search_server.get_document_count() == 5
        assert list(search_server) == [0, 1, 2, 3, 4]


class TestMain:
    def test_query_pages(self, input_file, capsys):
        assert main([str(input_file), "-q", "curly dog"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Results for request: curly dog",
            "{ document_id = 1, relevance = 0.402359, rating = 2 }"
            "{ document_id = 3, relevance = 0.229073, rating = 2 }",
            "Page break",
            "{ document_id = 4, relevance = 0.229073, rating = 1 }",
            "Page break",
        ]

    def test_parallel_queries(self, input_file, capsys):
        assert main([str(input_file), "--parallel", "-q", "curly", "-q", "hamster"]) == 0
        out = capsys.readouterr().out
        assert out.index("Results for request: curly") < out.index("Results for request: hamster")
        assert "document_id = 4" in out

    def test_remove_duplicates(self, tmp_path, capsys):
        path = tmp_path / "dups.txt"
        path.write_text("\n2\ncat dog\n0\ndog cat\n0\n", encoding="utf-8")
        assert main([str(path), "--remove-duplicates", "-q", "cat", "--page-size", "5"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "Found duplicate document id 1"
        assert out[1] == "Results for request: cat"

    def test_invalid_query(self, input_file, capsys):
        assert main([str(input_file), "-q", "cat --dog"]) == 1
        assert "Error:" in capsys.readouterr().err

    @pytest.mark.parametrize("page_size", ["0", "-3", "two"])
    def test_invalid_page_size(self, input_file, capsys, page_size):
        with pytest.raises(SystemExit) as exc_info:
            main([str(input_file), "-q", "cat", "--page-size", page_size])
        assert exc_info.value.code == 2
        captured = capsys.readouterr()
        assert "Results for request" not in captured.out
        assert "--page-size" in captured.err
