from script.fetch_answers import parse_answers

PAGE = """
<html><body>
  <h1>Past answers</h1>
  <ul>
    <li>2024-01-03 (Wed) 928 CRANE</li>
    <li>2024-01-02 (Tue) 927 SLATE</li>
    <li>2024-01-01 (Mon) 926 CRANE</li>
    <li>not a row 925 PLANE</li>
  </ul>
</body></html>
"""


def test_parse_answers_dedupes_in_page_order():
    assert parse_answers(PAGE) == ["crane", "slate"]
