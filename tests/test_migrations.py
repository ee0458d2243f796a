"""Schema produced by the Alembic revisions, checked against the catalog."""
import asyncio

import pytest
from sqlalchemy import inspect, text
from sqlalchemy.exc import IntegrityError

from lue_lue.config import settings
from lue_lue.database import build_engine
from lue_lue.errors import MigrationError
from lue_lue.main import create_app
from lue_lue.migrate import current_revision, downgrade, main, upgrade


TABLES = {"games", "players", "cards", "chats", "chat_messages", "claims"}


# ── Helpers ──────────────────────────────────────────────────────────────────

async def _inspect(engine, fn):
    async with engine.connect() as conn:
        return await conn.run_sync(lambda sync_conn: fn(inspect(sync_conn)))


async def _columns(engine, table):
    """Map column name -> (type, nullable, default) for *table*."""
    cols = await _inspect(engine, lambda insp: insp.get_columns(table))
    return {
        c["name"]: (str(c["type"]), c["nullable"], c["default"])
        for c in cols
    }


async def _foreign_keys(engine, table):
    fks = await _inspect(engine, lambda insp: insp.get_foreign_keys(table))
    return {
        (tuple(fk["constrained_columns"]), fk["referred_table"], tuple(fk["referred_columns"]))
        for fk in fks
    }


async def _primary_key(engine, table):
    pk = await _inspect(engine, lambda insp: insp.get_pk_constraint(table))
    return pk["constrained_columns"]


async def _execute(engine, sql, **params):
    async with engine.begin() as conn:
        await conn.execute(text(sql), params)


async def _seed_old_chat_with_message(engine):
    await _execute(engine, "INSERT INTO players (id, name) VALUES ('p1', 'Ada')")
    await _execute(engine, "INSERT INTO chats (id) VALUES ('c1')")
    await _execute(
        engine,
        "INSERT INTO chat_messages (id, player_id, content, chat_id) "
        "VALUES ('m1', 'p1', 'hello', 'c1')",
    )


# ── Revision 0001 ────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_initial_schema_creates_exactly_six_tables(bare_engine):
    assert await current_revision(bare_engine) is None

    await upgrade(bare_engine, "0001")

    assert await current_revision(bare_engine) == "0001"
    names = set(await _inspect(bare_engine, lambda insp: insp.get_table_names()))
    assert names - {"alembic_version"} == TABLES


@pytest.mark.asyncio
async def test_initial_schema_columns(bare_engine):
    await upgrade(bare_engine, "0001")

    assert await _columns(bare_engine, "games") == {
        "id": ("TEXT", False, None),
        "which_player_turn": ("TEXT", False, None),
        "state": ("INTEGER", False, "0"),
        "started_at": ("TIMESTAMP", False, "CURRENT_TIMESTAMP"),
        "round_number": ("INTEGER", False, "0"),
        "card_to_play": ("INTEGER", False, None),
    }
    assert await _columns(bare_engine, "players") == {
        "id": ("TEXT", False, None),
        "name": ("TEXT", False, None),
        "score": ("INTEGER", True, "0"),
        "joined_at": ("TIMESTAMP", False, "CURRENT_TIMESTAMP"),
    }
    assert await _columns(bare_engine, "cards") == {
        "card_type": ("INTEGER", False, "0"),
        "player_id": ("TEXT", True, None),
        "claim_id": ("TEXT", True, None),
        "id": ("TEXT", False, None),
    }
    assert await _columns(bare_engine, "chats") == {
        "number_of_messages": ("INTEGER", False, "0"),
        "id": ("TEXT", False, None),
    }
    assert await _columns(bare_engine, "chat_messages") == {
        "id": ("TEXT", False, None),
        "player_id": ("TEXT", False, None),
        "content": ("TEXT", False, None),
        "sent_at": ("TIMESTAMP", False, "CURRENT_TIMESTAMP"),
        "chat_id": ("TEXT", False, None),
    }
    assert await _columns(bare_engine, "claims") == {
        "created_by": ("TEXT", False, None),
        "number_of_cards": ("INTEGER", False, "0"),
        "id": ("TEXT", False, None),
    }


@pytest.mark.asyncio
async def test_initial_schema_keys(bare_engine):
    await upgrade(bare_engine, "0001")

    for table in TABLES:
        assert await _primary_key(bare_engine, table) == ["id"]

    assert await _foreign_keys(bare_engine, "cards") == {
        (("player_id",), "players", ("id",)),
        (("claim_id",), "claims", ("id",)),
    }
    assert await _foreign_keys(bare_engine, "chat_messages") == {
        (("player_id",), "players", ("id",)),
        (("chat_id",), "chats", ("id",)),
    }
    assert await _foreign_keys(bare_engine, "claims") == {
        (("created_by",), "players", ("id",)),
    }
    assert await _foreign_keys(bare_engine, "chats") == set()

    uniques = await _inspect(bare_engine, lambda insp: insp.get_unique_constraints("games"))
    assert [u["column_names"] for u in uniques] == [["which_player_turn"]]


@pytest.mark.asyncio
async def test_card_can_reference_claim_created_later_in_the_same_revision(bare_engine):
    await upgrade(bare_engine, "0001")
    await _execute(bare_engine, "INSERT INTO players (id, name) VALUES ('p1', 'Ada')")
    await _execute(bare_engine, "INSERT INTO claims (id, created_by) VALUES ('cl1', 'p1')")
    await _execute(
        bare_engine,
        "INSERT INTO cards (id, player_id, claim_id) VALUES ('k1', 'p1', 'cl1')",
    )

    with pytest.raises(IntegrityError):
        await _execute(bare_engine, "INSERT INTO cards (id, claim_id) VALUES ('k2', 'nope')")


# ── Constraints on the migrated schema ───────────────────────────────────────

@pytest.mark.asyncio
async def test_game_without_card_to_play_is_rejected(db_engine):
    with pytest.raises(IntegrityError):
        await _execute(
            db_engine, "INSERT INTO games (id, which_player_turn) VALUES ('g1', 'p1')"
        )


@pytest.mark.asyncio
async def test_game_defaults_are_filled_in(db_engine):
    await _execute(
        db_engine,
        "INSERT INTO games (id, which_player_turn, card_to_play) VALUES ('g1', 'p1', 2)",
    )
    async with db_engine.connect() as conn:
        row = (await conn.execute(
            text("SELECT state, round_number, started_at FROM games WHERE id = 'g1'")
        )).one()
    assert row.state == 0
    assert row.round_number == 0
    assert row.started_at is not None


@pytest.mark.asyncio
async def test_which_player_turn_is_unique(db_engine):
    await _execute(
        db_engine,
        "INSERT INTO games (id, which_player_turn, card_to_play) VALUES ('g1', 'p1', 0)",
    )
    with pytest.raises(IntegrityError):
        await _execute(
            db_engine,
            "INSERT INTO games (id, which_player_turn, card_to_play) VALUES ('g2', 'p1', 1)",
        )


@pytest.mark.asyncio
async def test_chat_message_needs_existing_chat(db_engine):
    await _execute(db_engine, "INSERT INTO players (id, name) VALUES ('p1', 'Ada')")
    with pytest.raises(IntegrityError):
        await _execute(
            db_engine,
            "INSERT INTO chat_messages (id, player_id, content, chat_id) "
            "VALUES ('m1', 'p1', 'hi', 'missing')",
        )


@pytest.mark.asyncio
async def test_claim_needs_a_creator(db_engine):
    with pytest.raises(IntegrityError):
        await _execute(db_engine, "INSERT INTO claims (id) VALUES ('cl1')")


@pytest.mark.asyncio
async def test_unassigned_card_is_allowed(db_engine):
    await _execute(db_engine, "INSERT INTO cards (id) VALUES ('k1')")
    async with db_engine.connect() as conn:
        row = (await conn.execute(text("SELECT * FROM cards"))).one()
    assert row.card_type == 0
    assert row.player_id is None
    assert row.claim_id is None


# ── Revision 0003 ────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_chat_revision_adds_required_game_reference(db_engine):
    assert await current_revision(db_engine) == "0003"

    chats = await _columns(db_engine, "chats")
    assert chats["game_id"] == ("TEXT", False, None)
    assert await _foreign_keys(db_engine, "chats") == {
        (("game_id",), "games", ("id",)),
    }

    with pytest.raises(IntegrityError):
        await _execute(db_engine, "INSERT INTO chats (id, game_id) VALUES ('c1', 'nope')")
    with pytest.raises(IntegrityError):
        await _execute(db_engine, "INSERT INTO chats (id) VALUES ('c2')")

    await _execute(
        db_engine,
        "INSERT INTO games (id, which_player_turn, card_to_play) VALUES ('g1', 'p1', 0)",
    )
    await _execute(db_engine, "INSERT INTO chats (id, game_id) VALUES ('c3', 'g1')")


@pytest.mark.asyncio
async def test_chat_revision_fails_while_messages_reference_old_chats(bare_engine):
    await upgrade(bare_engine, "0001")
    await _seed_old_chat_with_message(bare_engine)

    with pytest.raises(MigrationError) as excinfo:
        await upgrade(bare_engine, "0003")

    assert excinfo.value.revision == "0003"
    assert await current_revision(bare_engine) == "0001"
    assert "game_id" not in await _columns(bare_engine, "chats")
    async with bare_engine.connect() as conn:
        assert (await conn.execute(text("SELECT count(*) FROM chats"))).scalar() == 1


@pytest.mark.asyncio
async def test_chat_revision_succeeds_once_messages_are_removed(bare_engine):
    await upgrade(bare_engine, "0001")
    await _seed_old_chat_with_message(bare_engine)
    await _execute(bare_engine, "DELETE FROM chat_messages")

    await upgrade(bare_engine, "0003")

    assert await current_revision(bare_engine) == "0003"
    assert "game_id" in await _columns(bare_engine, "chats")
    # drop-and-create: the old chat is gone
    async with bare_engine.connect() as conn:
        assert (await conn.execute(text("SELECT count(*) FROM chats"))).scalar() == 0


@pytest.mark.asyncio
async def test_downgrade_round_trip(db_engine):
    await downgrade(db_engine, "0001")
    assert await current_revision(db_engine) == "0001"
    assert "game_id" not in await _columns(db_engine, "chats")

    await downgrade(db_engine, "base")
    assert await current_revision(db_engine) is None
    names = set(await _inspect(db_engine, lambda insp: insp.get_table_names()))
    assert names & TABLES == set()

    await upgrade(db_engine, "head")
    assert await current_revision(db_engine) == "0003"


# ── Command line and startup ─────────────────────────────────────────────────

async def _seed_file(database_url):
    engine = build_engine(database_url)
    try:
        await _seed_old_chat_with_message(engine)
    finally:
        await engine.dispose()


def test_cli_upgrade_then_current(database_url, capsys):
    main(["current", "--database-url", database_url])
    main(["upgrade", "--database-url", database_url])
    main(["current", "--database-url", database_url])

    assert capsys.readouterr().out.split() == ["<base>", "0003", "0003"]


def test_cli_downgrade_needs_a_target(database_url):
    with pytest.raises(SystemExit) as excinfo:
        main(["downgrade", "--database-url", database_url])
    assert "target revision" in str(excinfo.value.code)


def test_cli_downgrade_to_revision(database_url, capsys):
    main(["upgrade", "--database-url", database_url])
    main(["downgrade", "0001", "--database-url", database_url])

    assert capsys.readouterr().out.split() == ["0003", "0001"]


def test_cli_turns_failed_migration_into_exit(database_url, capsys):
    main(["upgrade", "0001", "--database-url", database_url])
    asyncio.run(_seed_file(database_url))

    with pytest.raises(SystemExit) as excinfo:
        main(["upgrade", "--database-url", database_url])
    assert "Upgrade to head failed" in str(excinfo.value.code)

    main(["current", "--database-url", database_url])
    assert capsys.readouterr().out.split() == ["0001", "0001"]


@pytest.mark.asyncio
async def test_startup_applies_all_revisions(bare_engine, monkeypatch):
    monkeypatch.setattr(settings, "MIGRATE_ON_STARTUP", True)
    monkeypatch.setattr("lue_lue.main.engine", bare_engine)
    app = create_app()

    async with app.router.lifespan_context(app):
        assert await current_revision(bare_engine) == "0003"


@pytest.mark.asyncio
async def test_startup_migration_can_be_switched_off(bare_engine, monkeypatch):
    monkeypatch.setattr(settings, "MIGRATE_ON_STARTUP", False)
    monkeypatch.setattr("lue_lue.main.engine", bare_engine)
    app = create_app()

    async with app.router.lifespan_context(app):
        assert await current_revision(bare_engine) is None
