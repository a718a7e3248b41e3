from relnotes.changelog.classifier import PlainEntry, TypedEntry, classify, collect_contributors, make_entry
from relnotes.changelog.taxonomy import COMMIT_TYPES


def test_make_entry_picks_typed_variant_for_known_type(make_record):
    entry = make_entry(make_record(category="fix", scope="db", subject="close pool"))

    assert isinstance(entry, TypedEntry)
    assert entry.scope == "db"
    assert entry.subject == "close pool"
    assert entry.author == "Ada"
    assert entry.commit_url == "https://github.com/owner/repo/commit/abcdef1234567"


def test_make_entry_picks_plain_variant_for_unknown_type(make_record):
    entry = make_entry(make_record(category="wip", header="wip: hack"))

    assert isinstance(entry, PlainEntry)
    assert entry.short_sha == "abcdef1"
    assert entry.header == "wip: hack"


def test_make_entry_falls_back_to_login_without_display_name(make_record):
    entry = make_entry(make_record(header="tweak", author_name=None))

    assert entry.author == "ada"


def test_classify_buckets_in_taxonomy_order(make_record):
    records = [
        make_record(sha="1" * 10, category="chore", subject="bump deps"),
        make_record(sha="2" * 10, category="feat", subject="add a"),
        make_record(sha="3" * 10, header="random commit"),
        make_record(sha="4" * 10, category="feat", subject="add b"),
        make_record(sha="5" * 10, category="unknown", header="unknown: thing"),
    ]

    classified = classify(records)

    assert [t.key for t, _ in classified.sections] == ["feat", "chore"]
    feat_entries = classified.sections[0][1]
    assert [e.subject for e in feat_entries] == ["add a", "add b"]
    assert [e.header for e in classified.commits] == ["random commit", "unknown: thing"]
    assert classified.breaking == []


def test_every_record_lands_in_exactly_one_type_or_commits_bucket(make_record):
    records = [make_record(sha=f"{i:07d}", category=t.key, subject=t.key) for i, t in enumerate(COMMIT_TYPES)]
    records.append(make_record(sha="9999999", header="no type"))

    classified = classify(records)

    typed = sum(len(entries) for _, entries in classified.sections)
    assert typed + len(classified.commits) == len(records)
    assert len(classified.sections) == len(COMMIT_TYPES)


def test_breaking_records_also_keep_their_type_bucket(make_record):
    records = [
        make_record(sha="a" * 10, category="feat", subject="new api", breaking=True),
        make_record(sha="b" * 10, header="drop flag", breaking=True),
    ]

    classified = classify(records)

    assert len(classified.breaking) == 2
    assert isinstance(classified.breaking[0], TypedEntry)
    assert isinstance(classified.breaking[1], PlainEntry)
    assert classified.sections[0][1] == [classified.breaking[0]]
    assert classified.commits == [classified.breaking[1]]


def test_empty_input():
    classified = classify([])

    assert classified.is_empty()


def test_contributors_deduplicated_by_login_in_first_seen_order(make_record):
    records = [
        make_record(sha="1" * 10, author="bob", author_name="Bob"),
        make_record(sha="2" * 10, author="ada", author_name="Ada"),
        make_record(sha="3" * 10, author="bob", author_name="Robert"),
    ]

    contributors = collect_contributors(records)

    assert [c.login for c in contributors] == ["bob", "ada"]
    assert contributors[0].display_name == "Bob"


def test_contributors_fall_back_to_committer(make_record):
    records = [make_record(author=None, committer="carol")]

    contributors = collect_contributors(records)

    assert [c.login for c in contributors] == ["carol"]


def test_contributors_skip_records_without_identity(make_record):
    records = [make_record(author=None, committer=None, header="orphan")]

    classified = classify(records)

    assert classified.contributors == []
    assert len(classified.commits) == 1
    assert classified.commits[0].author == ""


def test_taxonomy_order_and_labels():
    assert [t.key for t in COMMIT_TYPES] == [
        "feat", "fix", "docs", "style", "refactor", "perf", "test", "build", "ci", "chore", "revert",
    ]
    assert COMMIT_TYPES[0].label == "✨ Features"
    assert COMMIT_TYPES[1].label == "🐛 Bug Fixes"


def test_make_entry_prefers_git_author_name(make_record):
    record = make_record(header="tweak", author=None, committer="web-flow")
    record.source_commit.author_name = "Ada Lovelace"

    entry = make_entry(record)

    assert entry.author == "Ada Lovelace"
