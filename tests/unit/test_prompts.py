from wisdomwell.ai.prompts import scripture_retrieval, translate_text
from wisdomwell.ai.prompts.catalogue import CATALOGUE, RELIGION_SYMBOLS, build_reference_catalogue
from wisdomwell.ai.schema import ALL_RELIGIONS, Religion


def test_every_religion_has_a_catalogue_block_and_symbol():
    assert set(CATALOGUE) == set(ALL_RELIGIONS)
    assert set(RELIGION_SYMBOLS) == set(ALL_RELIGIONS)
    for religion, block in CATALOGUE.items():
        assert block.startswith(f"{RELIGION_SYMBOLS[religion]} {religion.value}:")


def test_catalogue_is_scoped_to_the_requested_religions_in_order():
    document = build_reference_catalogue([Religion.TAOISM, Religion.ISLAM])

    assert document == CATALOGUE[Religion.TAOISM] + "\n\n" + CATALOGUE[Religion.ISLAM]
    assert "Tao Te Ching" in document
    assert "Sahih al-Bukhari" in document
    assert "Bhagavad Gita" not in document
    assert "Guru Granth Sahib" not in document


def test_catalogue_of_nothing_is_empty():
    assert build_reference_catalogue([]) == ""


def test_format_religions_is_comma_joined():
    assert scripture_retrieval.format_religions([Religion.HINDUISM, Religion.BUDDHISM]) == "Hinduism, Buddhism"


def test_retrieval_prompt_embeds_question_religions_and_scoped_catalogue():
    prompt = scripture_retrieval.create_prompt("What is the purpose of life?", [Religion.HINDUISM, Religion.SIKHISM])

    assert 'User\'s Question: "What is the purpose of life?"' in prompt
    assert "Selected Religions for Search: Hinduism, Sikhism" in prompt
    assert CATALOGUE[Religion.HINDUISM] in prompt
    assert CATALOGUE[Religion.SIKHISM] in prompt
    assert CATALOGUE[Religion.JUDAISM] not in prompt


def test_translation_prompt():
    prompt = translate_text.create_prompt("Be still.", "es")
    assert prompt == 'Translate the following text to es (es):\n\n"Be still."\n\nReturn ONLY the translated text.'
