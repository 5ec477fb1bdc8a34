'''
Static reference catalogue of canonical texts per religion.
Only the blocks for the selected religions are sent to the model.
'''
from types import MappingProxyType
from typing import Iterable, Mapping

from wisdomwell.ai.schema import Religion

RELIGION_SYMBOLS: Mapping[Religion, str] = MappingProxyType({
    Religion.HINDUISM: "🕉️",
    Religion.ISLAM: "☪️",
    Religion.CHRISTIANITY: "✝️",
    Religion.BUDDHISM: "☸️",
    Religion.JUDAISM: "🕎",
    Religion.JAINISM: "🛕",
    Religion.SIKHISM: "🛐",
    Religion.TAOISM: "☯️",
})

_SOURCES: Mapping[Religion, str] = MappingProxyType({
    Religion.HINDUISM: """\
    Sruti (Apaurusheya):
        Vedas: Rig, Yajur, Sama, Atharva
        Upanishads (e.g., Isha, Kena, Katha, Brihadaranyaka, Chandogya, Mundaka, Mandukya, Prashna, Aitareya, Taittiriya, Shvetashvatara)
        Aranyakas
        Brahmanas
    Smriti:
        Bhagavad Gita (part of Mahabharata)
        Manusmriti, Yajnavalkya Smriti, Narada Smriti, Brihaspati Smriti
        18 Major Puranas (e.g., Vishnu Purana, Bhagavata Purana, Shiva Purana, Markandeya Purana, Garuda Purana, Padma Purana) and 18 Upapuranas
        Epics: Mahabharata, Ramayana
        Darshanas: Nyaya Sutras, Vaisheshika Sutras, Samkhya Karika, Yoga Sutras of Patanjali, Mimamsa Sutras, Brahma Sutras (Vedanta)
        Agamas (Tantric texts)
        Bhakti Sutras: Narada Bhakti Sutra, Shandilya Bhakti Sutra
        Upa-Vedas: Ayurveda, Dhanurveda, Gandharvaveda, Shilpaveda""",
    Religion.ISLAM: """\
    Primary:
        Qur'an
    Secondary (Hadith collections, name the specific collection where possible):
        Sahih al-Bukhari
        Sahih Muslim
        Sunan Abu Dawood
        Jami' at-Tirmidhi
        Sunan an-Nasa'i
        Sunan Ibn Majah
        Muwatta Imam Malik""",
    Religion.CHRISTIANITY: """\
    Holy Bible:
        Old Testament (e.g., Genesis, Exodus, Psalms, Proverbs, Isaiah, Ecclesiastes, Micah)
        New Testament (e.g., Gospels: Matthew, Mark, Luke, John; Epistles: Romans, Corinthians, Ephesians; Revelation)""",
    Religion.BUDDHISM: """\
    Pali Canon (Tipitaka):
        Vinaya Pitaka (monastic discipline)
        Sutta Pitaka (discourses, e.g., Digha Nikaya, Majjhima Nikaya, Samyutta Nikaya, Anguttara Nikaya, Khuddaka Nikaya with the Dhammapada, Sutta Nipata, Jataka tales)
        Abhidhamma Pitaka (philosophy and psychology)
    Mahayana Sutras:
        Prajnaparamita Sutras (e.g., Heart Sutra, Diamond Sutra)
        Lotus Sutra
        Avatamsaka Sutra
        Lankavatara Sutra
        Pure Land Sutras
    Vajrayana:
        Tibetan Book of the Dead (Bardo Thodol)""",
    Religion.JUDAISM: """\
    Tanakh (Hebrew Bible):
        Torah (Genesis, Exodus, Leviticus, Numbers, Deuteronomy)
        Nevi'im (Prophets, e.g., Joshua, Judges, Samuel, Kings, Isaiah, Jeremiah, Ezekiel, Micah)
        Ketuvim (Writings, e.g., Psalms, Proverbs, Job, Song of Songs, Ruth, Lamentations, Ecclesiastes, Esther, Daniel, Ezra-Nehemiah, Chronicles)
    Talmud:
        Mishnah
        Gemara
    Midrash
    Zohar (Kabbalah)""",
    Religion.JAINISM: """\
    Agamas (canonical scriptures: Angas, Upangas, Prakirnakas, Chedasutras, Mulasutras)
        e.g., Acharanga Sutra, Sutrakritanga Sutra, Kalpa Sutra
    Tattvartha Sutra (philosophical text accepted by all sects)
    Samayasara (Acharya Kundakunda)
    Ratnakaranda Sravakacara""",
    Religion.SIKHISM: """\
    Primary:
        Guru Granth Sahib (cited by Ang, and often by Mehl for the Guru)
    Secondary:
        Dasam Granth (attributed to Guru Gobind Singh)
        Varan Bhai Gurdas
        Janamsakhis (biographies of Guru Nanak)""",
    Religion.TAOISM: """\
    Tao Te Ching (Daodejing), Laozi
    Zhuangzi (Chuang Tzu)
    Liezi
    Daozang (the Taoist Canon)""",
})

CATALOGUE: Mapping[Religion, str] = MappingProxyType({
    religion: f"{RELIGION_SYMBOLS[religion]} {religion.value}:\n{sources}"
    for religion, sources in _SOURCES.items()
})


def build_reference_catalogue(religions: Iterable[Religion]) -> str:
    """Concatenate the catalogue blocks for the given religions, in order."""
    return "\n\n".join(CATALOGUE[Religion(religion)] for religion in religions)
