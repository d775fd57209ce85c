import pytest

from gita_reader.reading import ContentIndex


def _chapter(number, name, transliterated, summary, verses_count):
    return {
        "id": number,
        "name": name,
        "name_transliterated": transliterated,
        "name_translation": f"Chapter {number}",
        "verses_count": verses_count,
        "chapter_number": number,
        "name_meaning": f"Meaning {number}",
        "chapter_summary": summary,
        "chapter_summary_hindi": "",
        "image_name": None,
    }


def _verse(verse_id, chapter_number, verse_number, text):
    return {
        "id": verse_id,
        "verse_number": verse_number,
        "chapter_number": chapter_number,
        "text": text,
        "transliteration": f"translit {verse_id}",
        "word_meanings": f"meanings {verse_id}",
    }


@pytest.fixture
def raw_content():
    chapters = [
        _chapter(1, "अर्जुनविषादयोग", "Arjuna Visada Yoga", "Arjuna despairs on the battlefield.", 3),
        _chapter(2, "सांख्ययोग", "Sankhya Yoga", "Krishna begins his teaching.", 2),
    ]
    # Source order is deliberately not verse order.
    verses = [
        _verse(3, 1, 3, "Behold this mighty army"),
        _verse(1, 1, 1, "Dhritarashtra said: on the field of dharma"),
        _verse(2, 1, 2, "Sanjaya said: seeing the army arrayed"),
        _verse(5, 2, 2, "The Blessed Lord said"),
        _verse(4, 2, 1, "Sanjaya said: to him thus overcome with pity"),
    ]
    translations = [
        {"author_name": "Swami A", "description": "On the holy field", "verse_id": 1},
        {"author_name": None, "description": "At Kurukshetra", "verse_id": 1},
        {"author_name": "Swami B", "description": "The teacher speaks", "verse_id": 5},
    ]
    commentaries = [
        {"author_name": "Acharya", "description": "Dharma-kshetra signifies the place of duty.", "verse_id": 1},
    ]
    return {
        "chapters": chapters,
        "verses": verses,
        "translations": translations,
        "commentaries": commentaries,
    }


@pytest.fixture
def index(raw_content):
    return ContentIndex.load(**raw_content)
