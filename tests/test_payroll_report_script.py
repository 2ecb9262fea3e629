from openpyxl import load_workbook

from payroll.scripts import payroll_report


def test_salary_report_demo_company(capsys):
    assert payroll_report.main(["salary"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("This is the salary report of ")
    assert "juyan:" in out
    assert "  Contract 1 (Monthly): 1000" in out
    assert "  Contract 2 (Hourly): 50" in out
    assert "Overall Total: 1050" in out


def test_log_report_from_roster(tmp_path, capsys):
    roster = tmp_path / "roster.csv"
    roster.write_text("name,type,rate,hours\nAlice,hourly,5,16\n", encoding="utf-8")

    assert payroll_report.main(["log", "--roster", str(roster)]) == 0
    out = capsys.readouterr().out
    assert "Employee: Alice" in out
    assert out.rstrip().endswith("Total Worked Hours: 16")


def test_excel_export(tmp_path, capsys):
    target = tmp_path / "out" / "salary.xlsx"
    assert payroll_report.main(["salary", "--excel", str(target)]) == 0
    assert target.exists()
    assert load_workbook(target)["Rapport"].cell(5, 1).value == "juyan"
    assert "Report exported to" in capsys.readouterr().out


def test_faulty_roster_exit_code(tmp_path, capsys):
    roster = tmp_path / "roster.csv"
    roster.write_text("name,type,salary\nAlice,weekly,100\n", encoding="utf-8")

    assert payroll_report.main(["salary", "--roster", str(roster)]) == 1
    err = capsys.readouterr().err
    assert "roster file could not be imported" in err
    assert "Row 1" in err


def test_missing_roster_exit_code(tmp_path, capsys):
    assert payroll_report.main(["salary", "--roster", str(tmp_path / "missing.csv")]) == 1
    assert "no longer exists" in capsys.readouterr().err
