from statement_parser import parse, report_trends


def test_report_trends_table(statement_text):
    report = report_trends(parse(statement_text))
    lines = report.splitlines()

    assert lines[0].split() == ["Category", "2024-07", "2024-08", "Total"]
    assert set(lines[1]) == {"-"}

    rows = {line.split()[0]: line.split()[1:] for line in lines[2:6]}
    assert list(rows) == ["food", "misc", "groceries", "rent"]
    assert rows["food"] == ["4.50", "0.00", "4.50"]
    assert rows["misc"] == ["0.00", "0.00", "0.00"]
    assert rows["rent"] == ["0.00", "1,200.00", "1,200.00"]

    assert lines[7].split() == ["Total", "56.80", "1,200.00", "1,256.80"]
    assert "Total deposits:    2,650.00" in lines
    assert "Net amount:        1,393.20" in lines


def test_report_trends_puts_unknown_month_last():
    text = "\n".join(
        [
            "08 JUL COFFEE 4.50",
            "08 AUG 2024 EFTPOS WOOLWORTHS 10.00 blank",
            "08 JUL 2024 UBER 3.00 blank",
        ]
    )
    header = report_trends(parse(text)).splitlines()[0].split()
    assert header == ["Category", "2024-07", "2024-08", "unknown", "Total"]


def test_report_trends_of_empty_result():
    report = report_trends(parse(""))
    assert report.splitlines()[0].split() == ["Category", "Total"]
    assert "Net amount:        0.00" in report.splitlines()
