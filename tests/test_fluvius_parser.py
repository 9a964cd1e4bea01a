import pytest
from datetime import datetime

from battery_engine_tou.fluvius_parser import parse_fluvius_csv


HEADER = (
    "Van (datum);Van (tijdstip);Tot (datum);Tot (tijdstip);EAN-code;Meter;"
    "Metertype;Register;Volume;Eenheid;Validatiestatus;Omschrijving"
)


def row(start, end, register, volume, status="Uitgelezen"):
    return (
        f'02-09-2025;{start};02-09-2025;{end};="541448820050357909";1SAG3200193141;'
        f"Digitale meter;{register};{volume};kWh;{status};"
    )


SAMPLE_CSV = "\n".join([
    HEADER,
    row("00:00:00", "00:15:00", "Afname Nacht", "0,065"),
    row("00:00:00", "00:15:00", "Injectie Nacht", "0,000"),
    row("00:15:00", "00:30:00", "Afname Nacht", "0,120"),
    row("00:15:00", "00:30:00", "Injectie Nacht", "0,050"),
])


def test_parses_intervals():
    assert len(parse_fluvius_csv(SAMPLE_CSV)) == 2


def test_extracts_timestamps():
    result = parse_fluvius_csv(SAMPLE_CSV)
    assert result[0].start_time == datetime(2025, 9, 2, 0, 0, 0)
    assert result[0].end_time == datetime(2025, 9, 2, 0, 15, 0)


def test_extracts_consumption_and_injection():
    result = parse_fluvius_csv(SAMPLE_CSV)

    assert result[0].consumption_kwh == pytest.approx(0.065)
    assert result[1].consumption_kwh == pytest.approx(0.120)
    assert result[0].injection_kwh == pytest.approx(0.0)
    assert result[1].injection_kwh == pytest.approx(0.050)


def test_comma_decimal_separator():
    csv = "\n".join([
        HEADER,
        row("00:00:00", "00:15:00", "Afname Nacht", "1,234"),
        row("00:00:00", "00:15:00", "Injectie Nacht", "0,567"),
    ])
    result = parse_fluvius_csv(csv)

    assert result[0].consumption_kwh == pytest.approx(1.234)
    assert result[0].injection_kwh == pytest.approx(0.567)


def test_strips_bom():
    csv = "\ufeff" + "\n".join([
        HEADER,
        row("00:00:00", "00:15:00", "Afname Nacht", "0,100"),
        row("00:00:00", "00:15:00", "Injectie Nacht", "0,000"),
    ])
    result = parse_fluvius_csv(csv)

    assert len(result) == 1
    assert result[0].consumption_kwh == pytest.approx(0.100)


def test_empty_volume_is_zero():
    csv = "\n".join([
        HEADER,
        row("00:00:00", "00:15:00", "Afname Nacht", "", status="Geen verbruik"),
        row("00:00:00", "00:15:00", "Injectie Nacht", "", status="Geen verbruik"),
    ])
    result = parse_fluvius_csv(csv)

    assert len(result) == 1
    assert result[0].consumption_kwh == 0
    assert result[0].injection_kwh == 0


def test_output_sorted_and_bad_rows_skipped():
    csv = "\r\n".join([
        HEADER,
        row("00:15:00", "00:30:00", "Afname Dag", "0,2"),
        "te;weinig;kolommen",
        row("00:00:00", "00:15:00", "Afname Dag", "0,1"),
        "xx-09-2025;00:30:00;02-09-2025;00:45:00;ean;meter;type;Afname Dag;0,3;kWh;;",
        "",
    ])
    result = parse_fluvius_csv(csv)

    assert [iv.start_time.minute for iv in result] == [0, 15]


def test_header_only_returns_empty():
    assert parse_fluvius_csv(HEADER) == []
    assert parse_fluvius_csv("") == []


@pytest.mark.parametrize("volume", ["abc", "NaN", "nan", "inf", "-Infinity", "--"])
def test_unreadable_volume_is_zero(volume):
    """Tekst die geen volume is telt als 0.0, ook wat float() als nan/inf leest."""
    csv = "\n".join([
        HEADER,
        row("00:00:00", "00:15:00", "Afname Nacht", volume),
        row("00:00:00", "00:15:00", "Injectie Nacht", volume),
    ])
    result = parse_fluvius_csv(csv)

    assert len(result) == 1
    assert result[0].consumption_kwh == 0.0
    assert result[0].injection_kwh == 0.0


def test_same_instant_written_differently_is_merged():
    """2-9-2025 en 02-09-2025: zelfde tijdstip → één interval."""
    csv = "\n".join([
        HEADER,
        "2-9-2025;0:00:00;2-9-2025;0:15:00;ean;meter;Digitale meter;Afname Nacht;0,300;kWh;Uitgelezen;",
        row("00:00:00", "00:15:00", "Injectie Nacht", "0,100"),
    ])
    result = parse_fluvius_csv(csv)

    assert len(result) == 1
    assert result[0].start_time == datetime(2025, 9, 2, 0, 0, 0)
    assert result[0].consumption_kwh == pytest.approx(0.300)
    assert result[0].injection_kwh == pytest.approx(0.100)
