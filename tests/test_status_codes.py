import http

import pytest

import httpcodes
from httpcodes import status_codes
from httpcodes.constants import StatusCategory

_PREDICATES = (
    status_codes.is_informational,
    status_codes.is_success,
    status_codes.is_redirection,
    status_codes.is_client_error,
    status_codes.is_server_error,
)


class TestStatusCodePredicates:
    @pytest.mark.parametrize(
        'code,category',
        [
            (httpcodes.OK, StatusCategory.SUCCESS),
            (httpcodes.NOT_FOUND, StatusCategory.CLIENT_ERROR),
            (httpcodes.INTERNAL_SERVER_ERROR, StatusCategory.SERVER_ERROR),
            (httpcodes.CONTINUE, StatusCategory.INFORMATIONAL),
            (httpcodes.FOUND, StatusCategory.REDIRECTION),
            (99, StatusCategory.INVALID),
            (600, StatusCategory.INVALID),
            (0, StatusCategory.INVALID),
            (-200, StatusCategory.INVALID),
            (999, StatusCategory.INVALID),
        ],
    )
    def test_classify(self, code, category):
        assert status_codes.classify(code) is category

    @pytest.mark.parametrize('code', [99, 100, 199, 200, 399, 599, 600])
    def test_is_valid_matches_range(self, code):
        assert status_codes.is_valid_status_code(code) == (100 <= code < 600)
        assert httpcodes.StatusCode(code).is_valid() == (100 <= code < 600)

    def test_exactly_one_band_per_valid_code(self):
        for code in range(100, 600):
            matches = [predicate(code) for predicate in _PREDICATES]
            assert matches.count(True) == 1, code
            assert matches.index(True) == code // 100 - 1

    @pytest.mark.parametrize('code', [-1, 0, 42, 99, 600, 601, 700, 1000])
    def test_no_band_outside_range(self, code):
        assert not any(predicate(code) for predicate in _PREDICATES)

    @pytest.mark.parametrize(
        'code,method',
        [
            (101, 'is_informational'),
            (204, 'is_success'),
            (308, 'is_redirection'),
            (418, 'is_client_error'),
            (511, 'is_server_error'),
        ],
    )
    def test_status_code_methods(self, code, method):
        status = httpcodes.StatusCode(code)
        assert getattr(status, method)()
        assert status.category is status_codes.classify(code)

    @pytest.mark.parametrize('code', [100, 200, 404, 599])
    def test_validate_valid(self, code):
        status_codes.validate_status_code(code)

    @pytest.mark.parametrize('code', [99, 600, 0, 999])
    def test_validate_invalid(self, code):
        with pytest.raises(httpcodes.InvalidStatusCode) as exc_info:
            status_codes.validate_status_code(code)

        assert exc_info.value.code == code
        assert str(exc_info.value) == 'invalid status code: {}'.format(code)


class TestStatusCode:
    @pytest.mark.parametrize(
        'value',
        [404, http.HTTPStatus.NOT_FOUND, '404', '404 Not Found', b'404 Not Found'],
    )
    def test_coercion(self, value):
        code = httpcodes.StatusCode(value)

        assert code == 404
        assert type(code) is httpcodes.StatusCode

    @pytest.mark.parametrize('value', ['', '12', 'catsup', 5.2, None])
    def test_coercion_invalid(self, value):
        with pytest.raises(ValueError):
            httpcodes.StatusCode(value)

    def test_behaves_like_int(self):
        code = httpcodes.StatusCode(200)

        assert code == 200
        assert hash(code) == hash(200)
        assert {200: 'x'}[code] == 'x'
        assert code + 1 == 201
        assert sorted([httpcodes.NOT_FOUND, httpcodes.OK]) == [200, 404]

    def test_str_and_repr(self):
        code = httpcodes.StatusCode(404)

        assert str(code) == '404'
        assert '{}'.format(code) == '404'
        assert f'{code:>5}' == '  404'
        assert repr(code) == 'StatusCode(404)'

    def test_out_of_range_codes_are_constructible(self):
        code = httpcodes.StatusCode(999)

        assert code == 999
        assert not code.is_valid()
        assert code.category is StatusCategory.INVALID

    def test_format_standard(self):
        assert (
            httpcodes.StatusCode(404).format()
            == '404 -> Requested resource could not be found'
        )
        assert (
            httpcodes.OK.format()
            == '200 -> Request succeeded and response contains requested data'
        )

    def test_format_unknown(self):
        assert httpcodes.StatusCode(999).format() == '999 -> Unknown Status Code'

    def test_format_with_registry(self, status_registry):
        status_registry.register(599, 'Network connect timeout')

        code = httpcodes.StatusCode(599)
        assert code.format(status_registry) == '599 -> Network connect timeout'
        assert code.format() == '599 -> Unknown Status Code'

    def test_print(self, capsys):
        httpcodes.NOT_FOUND.print()

        out, __ = capsys.readouterr()
        assert out == '404 -> Requested resource could not be found\n'


class TestStandardTable:
    def test_size(self):
        assert len(status_codes.STATUS_DESCRIPTIONS) == 55

    @pytest.mark.parametrize(
        'code,description',
        [
            (httpcodes.OK, 'Request succeeded and response contains requested data'),
            (httpcodes.NOT_FOUND, 'Requested resource could not be found'),
            (httpcodes.IM_A_TEAPOT, "I'm a teapot - RFC 2324 April Fools' joke"),
            (
                httpcodes.NETWORK_AUTHENTICATION_REQUIRED,
                'Client must authenticate to gain network access',
            ),
            (httpcodes.CONTINUE, 'Request received, processing continues'),
        ],
    )
    def test_descriptions(self, code, description):
        assert status_codes.STATUS_DESCRIPTIONS[code] == description
        assert code.describe() == description

    def test_read_only(self):
        with pytest.raises(TypeError):
            status_codes.STATUS_DESCRIPTIONS[599] = 'nope'

    def test_every_standard_code_is_valid(self):
        for code in status_codes.STATUS_DESCRIPTIONS:
            assert type(code) is httpcodes.StatusCode
            assert code.is_valid()

    def test_named_constants_match_table(self):
        for name in status_codes.__all__:
            value = getattr(status_codes, name)
            if isinstance(value, httpcodes.StatusCode):
                description = getattr(status_codes, name + '_DESC')
                assert status_codes.STATUS_DESCRIPTIONS[value] == description

    def test_code_set(self):
        expected = (
            [100, 101, 102]
            + list(range(200, 207))
            + [300, 301, 302, 303, 304, 305, 307, 308]
            + list(range(400, 419))
            + [422, 425, 426, 428, 429, 431, 451]
            + list(range(500, 509))
            + [510, 511]
        )

        assert sorted(status_codes.STATUS_DESCRIPTIONS) == expected
