import http
import io

import pytest

import httpcodes
from httpcodes.util import misc


class TestHTTPStatusToCode:
    @pytest.mark.parametrize(
        'v_in,v_out',
        [
            (http.HTTPStatus(200), 200),
            (http.HTTPStatus(307), 307),
            (http.HTTPStatus.NOT_FOUND, 404),
            (404, 404),
            (httpcodes.StatusCode(418), 418),
            ('200 OK', 200),
            (b'200 OK', 200),
            ('404', 404),
            ('702 Emacs', 702),
            (b'703 Vim', 703),
        ],
    )
    def test_http_status_to_code(self, v_in, v_out):
        code = httpcodes.http_status_to_code(v_in)

        assert code == v_out
        assert type(code) is int

    @pytest.mark.parametrize('v', ['', ' ', '1', '12', 'catsup', b'', 5.2, None])
    def test_http_status_to_code_neg(self, v):
        with pytest.raises(ValueError):
            httpcodes.http_status_to_code(v)


class TestFormatting:
    @pytest.mark.parametrize(
        'key,description,expected',
        [
            (404, 'Not here', '404 -> Not here'),
            (httpcodes.StatusCode(200), 'Fine', '200 -> Fine'),
            ('GET', 'Fetch', 'GET -> Fetch'),
            (httpcodes.Method('PURGE'), 'Drop', 'PURGE -> Drop'),
        ],
    )
    def test_format_entry(self, key, description, expected):
        assert httpcodes.format_entry(key, description) == expected

    def test_dump_status_codes(self):
        text = httpcodes.dump_status_codes(
            {
                httpcodes.OK: httpcodes.OK_DESC,
                httpcodes.NOT_FOUND: httpcodes.NOT_FOUND_DESC,
            }
        )

        assert '200 ->' in text
        assert '404 ->' in text
        assert sorted(text.splitlines()) == [
            '200 -> Request succeeded and response contains requested data',
            '404 -> Requested resource could not be found',
        ]

    def test_dump_status_codes_enum_keys(self):
        text = httpcodes.dump_status_codes({http.HTTPStatus.NOT_FOUND: 'Nope'})
        assert text == '404 -> Nope\n'

    def test_dump_methods(self):
        text = httpcodes.dump_methods(httpcodes.METHOD_DESCRIPTIONS)
        lines = text.splitlines()

        assert len(lines) == 9
        assert 'GET -> Retrieve data from server' in lines
        assert 'CONNECT -> Connect to server' in lines

    @pytest.mark.parametrize('func', [misc.dump_status_codes, misc.dump_methods])
    def test_dump_empty(self, func):
        assert func({}) == ''

    def test_print_status_codes(self, capsys):
        httpcodes.print_status_codes({httpcodes.OK: httpcodes.OK_DESC})

        out, __ = capsys.readouterr()
        assert out == (
            '200 -> Request succeeded and response contains requested data\n\n'
        )

    def test_print_methods_to_file(self):
        stream = io.StringIO()
        httpcodes.print_methods({httpcodes.GET: httpcodes.GET_DESC}, file=stream)

        assert stream.getvalue() == 'GET -> Retrieve data from server\n\n'
