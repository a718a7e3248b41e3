from relnotes.commits.parser import parse_commit_message


def test_parse_conventional_header():
    parsed = parse_commit_message("feat(api): add health endpoint")

    assert parsed.type == "feat"
    assert parsed.scope == "api"
    assert parsed.subject == "add health endpoint"
    assert parsed.header == "feat(api): add health endpoint"
    assert parsed.body is None
    assert parsed.footer is None


def test_parse_header_without_scope_and_with_bang():
    parsed = parse_commit_message("refactor!: drop python 2")

    assert parsed.type == "refactor"
    assert parsed.scope is None
    assert parsed.subject == "drop python 2"


def test_parse_free_form_header():
    parsed = parse_commit_message("Update README")

    assert parsed.type is None
    assert parsed.header == "Update README"
    assert parsed.subject == "Update README"


def test_parse_body_and_breaking_footer():
    message = (
        "feat: new config format\n"
        "\n"
        "Configuration is now read from TOML.\n"
        "\n"
        "BREAKING CHANGE: the JSON loader is gone\n"
        "Closes #42"
    )

    parsed = parse_commit_message(message)

    assert parsed.body == "Configuration is now read from TOML."
    assert parsed.footer == "BREAKING CHANGE: the JSON loader is gone\nCloses #42"
    assert len(parsed.notes) == 1
    assert parsed.notes[0].title == "BREAKING CHANGE"
    assert parsed.notes[0].text == "the JSON loader is gone"
    assert [(r.action, r.issue) for r in parsed.references] == [("Closes", "42")]


def test_parse_merge_commit():
    message = "Merge pull request #12 from octo/feature-x\n\nfix(ui): align buttons"

    parsed = parse_commit_message(message)

    assert parsed.merge == "Merge pull request #12 from octo/feature-x"
    assert parsed.merge_fields == {"issueId": "12", "source": "octo/feature-x"}
    assert parsed.header == "fix(ui): align buttons"
    assert parsed.type == "fix"
    assert parsed.scope == "ui"


def test_parse_mentions_and_plain_references():
    parsed = parse_commit_message("docs: thanks @octocat for #3\n\nSee owner/repo#9")

    assert parsed.mentions == ["octocat"]
    refs = {(r.owner, r.repository, r.issue) for r in parsed.references}
    assert refs == {(None, None, "3"), ("owner", "repo", "9")}


def test_parse_revert():
    message = 'Revert "feat: add thing"\n\nThis reverts commit abc123.'

    parsed = parse_commit_message(message)

    assert parsed.revert == {"header": "feat: add thing", "hash": "abc123"}


def test_parse_empty_message():
    parsed = parse_commit_message("")

    assert parsed.header is None
    assert parsed.type is None
