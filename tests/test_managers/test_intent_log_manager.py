"""Tests for IntentLogManager class."""

from sqlalchemy.orm import Session

from scum_bot.managers.intent_log_manager import IntentLogManager
from scum_bot.parser.intent_types import CustomValue, IntentResult, NumberValue, Slot


class TestIntentLogManager:
    """Tests for intent logging."""

    def test_log_entry(self, db_session: Session):
        """Verify an entry stores the classification."""
        intent = IntentResult(
            input="roll three dice",
            intent_name="rollDice",
            probability=0.85,
            slots=[Slot(slot_name="rolls", raw_value="three", value=NumberValue(value=3))],
        )
        entry = IntentLogManager(db_session).log(
            message_id="1",
            channel_id="100",
            user_id="42",
            content="<@999> rol three dice",
            intent_result=intent,
            corrected="roll three dice",
        )

        assert entry.id is not None
        assert entry.intent_name == "rollDice"
        assert entry.probability == 0.85
        assert entry.content == "<@999> rol three dice"
        assert entry.corrected_content == "roll three dice"
        assert entry.slots == [
            {
                "slot_name": "rolls",
                "raw_value": "three",
                "value": {"kind": "number", "value": 3.0},
            }
        ]

    def test_log_abstained_intent(self, db_session: Session):
        """Verify an abstained classification is logged without intent."""
        entry = IntentLogManager(db_session).log(
            message_id="2",
            channel_id="100",
            user_id="42",
            content="hello",
            intent_result=IntentResult(input="hello"),
        )
        assert entry.intent_name is None
        assert entry.corrected_content is None
        assert entry.slots == []

    def test_recent_newest_first(self, db_session: Session):
        """Verify recent returns the newest entries first."""
        manager = IntentLogManager(db_session)
        for message_id in ("a", "b", "c"):
            manager.log(
                message_id=message_id,
                channel_id="100",
                user_id="42",
                content="help",
                intent_result=IntentResult(
                    input="help",
                    intent_name="showHelp",
                    slots=[Slot(slot_name="topic", value=CustomValue(value="dice"))],
                ),
            )

        recent = manager.recent(limit=2)
        assert [entry.message_id for entry in recent] == ["c", "b"]
