from __future__ import annotations

from .models import NamedAttribute

NAMES: tuple[NamedAttribute, ...] = (
    NamedAttribute(
        display_form="ٱلرَّحْمَـٰن",
        label="Ar-Rahman",
        meaning="The Most Gracious",
        usage="Invoked for mercy and compassion",
        citation="Qur'an 1:3",
    ),
    NamedAttribute(
        display_form="ٱلرَّحِيم",
        label="Ar-Rahim",
        meaning="The Most Merciful",
        usage="Brings divine mercy and forgiveness",
        citation="Qur'an 1:3",
    ),
    NamedAttribute(
        display_form="ٱلْمَلِك",
        label="Al-Malik",
        meaning="The King and Owner of Dominion",
        usage="Brings power, control, and self-respect",
        citation="Qur'an 59:23",
    ),
    NamedAttribute(
        display_form="ٱلْقُدُّوس",
        label="Al-Quddus",
        meaning="The Absolutely Pure",
        usage="Purifies the soul and grants spiritual clarity",
        citation="Qur'an 59:23",
    ),
    NamedAttribute(
        display_form="ٱلسَّلَام",
        label="As-Salam",
        meaning="The Source of Peace, Safety",
        usage="Grants inner peace and protection from harm",
        citation="Qur'an 59:23",
    ),
    NamedAttribute(
        display_form="ٱلْمُؤْمِن",
        label="Al-Mu’min",
        meaning="The One Who gives Emaan and Security",
        usage="Increases faith and protects from fear",
        citation="Qur'an 59:23",
    ),
    NamedAttribute(
        display_form="ٱلْمُهَيْمِن",
        label="Al-Muhaymin",
        meaning="The Guardian, The Witness, The Overseer",
        usage="Provides protection and guidance",
        citation="Qur'an 59:23",
    ),
    NamedAttribute(
        display_form="ٱلْعَزِيز",
        label="Al-Aziz",
        meaning="The Almighty",
        usage="Grants strength and dignity",
        citation="Qur'an 59:23",
    ),
    NamedAttribute(
        display_form="ٱلْجَبَّار",
        label="Al-Jabbar",
        meaning="The Compeller, The Restorer",
        usage="Heals broken hearts and restores justice",
        citation="Qur'an 59:23",
    ),
    NamedAttribute(
        display_form="ٱلْمُتَكَبِّر",
        label="Al-Mutakabbir",
        meaning="The Supreme, The Majestic",
        usage="Protects from arrogance and grants humility",
        citation="Qur'an 59:23",
    ),
    NamedAttribute(
        display_form="ٱلْخَالِق",
        label="Al-Khaliq",
        meaning="The Creator, The Maker",
        usage="Invoked to develop creativity and wisdom",
        citation="Qur'an 59:24",
    ),
    NamedAttribute(
        display_form="ٱلْبَارِئ",
        label="Al-Bari’",
        meaning="The Evolver",
        usage="Helps to overcome difficulty in creation or invention",
        citation="Qur'an 59:24",
    ),
    NamedAttribute(
        display_form="ٱلْمُصَوِّر",
        label="Al-Musawwir",
        meaning="The Fashioner",
        usage="Enhances artistic abilities and uniqueness",
        citation="Qur'an 59:24",
    ),
    NamedAttribute(
        display_form="ٱلْغَفَّار",
        label="Al-Ghaffar",
        meaning="The Constant Forgiver",
        usage="Used to seek forgiveness",
        citation="Qur'an 20:82",
    ),
    NamedAttribute(
        display_form="ٱلْقَهَّار",
        label="Al-Qahhar",
        meaning="The All-Subduer",
        usage="Helps to overcome enemies and lower the ego",
        citation="Qur'an 13:16",
    ),
    NamedAttribute(
        display_form="ٱلْوَهَّاب",
        label="Al-Wahhab",
        meaning="The Supreme Bestower",
        usage="Used to seek blessings and generosity",
        citation="Qur'an 3:8",
    ),
    NamedAttribute(
        display_form="ٱلرَّزَّاق",
        label="Ar-Razzaq",
        meaning="The Provider",
        usage="Invoked for sustenance and provision",
        citation="Qur'an 51:58",
    ),
    NamedAttribute(
        display_form="ٱلْفَتَّاح",
        label="Al-Fattah",
        meaning="The Supreme Opener",
        usage="Helps open doors of success and clarity",
        citation="Qur'an 34:26",
    ),
    NamedAttribute(
        display_form="ٱلْعَلِيم",
        label="Al-‘Aleem",
        meaning="The All-Knowing",
        usage="Grants knowledge and understanding",
        citation="Qur'an 2:32",
    ),
    NamedAttribute(
        display_form="ٱلْقَابِض",
        label="Al-Qaabid",
        meaning="The Withholder",
        usage="Used in times of restraint and patience",
        citation="Qur'an 2:245",
    ),
    NamedAttribute(
        display_form="ٱلْبَاسِط",
        label="Al-Baasit",
        meaning="The Extender",
        usage="Invoked to gain wealth and well-being",
        citation="Qur'an 2:245",
    ),
    NamedAttribute(
        display_form="ٱلْخَافِض",
        label="Al-Khaafid",
        meaning="The Reducer",
        usage="Humbles the proud and arrogant",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلرَّافِع",
        label="Ar-Raafi’",
        meaning="The Exalter",
        usage="Raises rank and status",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلْمُعِزّ",
        label="Al-Mu’izz",
        meaning="The Honourer, the Bestower",
        usage="Grants honor and dignity",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلْمُذِلّ",
        label="Al-Mudhill",
        meaning="The Dishonourer",
        usage="Used for justice against oppressors",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلسَّمِيع",
        label="As-Samee’",
        meaning="The All-Hearing",
        usage="Used to enhance prayers being heard",
        citation="Qur'an 2:127",
    ),
    NamedAttribute(
        display_form="ٱلْبَصِير",
        label="Al-Baseer",
        meaning="The All-Seeing",
        usage="Used to improve insight and vision",
        citation="Qur'an 4:58",
    ),
    NamedAttribute(
        display_form="ٱلْحَكَم",
        label="Al-Hakam",
        meaning="The Impartial Judge",
        usage="Invoked in legal matters and disputes",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلْعَدْل",
        label="Al-‘Adl",
        meaning="The Utterly Just",
        usage="Establishes fairness and equity",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱللَّطِيف",
        label="Al-Lateef",
        meaning="The Subtle One, The Most Gentle",
        usage="Brings ease in difficulties",
        citation="Qur'an 6:103",
    ),
    NamedAttribute(
        display_form="ٱلْخَبِير",
        label="Al-Khabeer",
        meaning="The All-Aware",
        usage="Grants wisdom in hidden matters",
        citation="Qur'an 6:18",
    ),
    NamedAttribute(
        display_form="ٱلْحَلِيم",
        label="Al-Haleem",
        meaning="The Most Forbearing",
        usage="Grants patience and calmness",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلْعَظِيم",
        label="Al-‘Azeem",
        meaning="The Magnificent, the Infinite",
        usage="Brings strength and confidence",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلْغَفُور",
        label="Al-Ghafoor",
        meaning="The Great Forgiver",
        usage="Grants complete forgiveness",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلشَّكُور",
        label="Ash-Shakoor",
        meaning="The Most Appreciative",
        usage="Multiplies good deeds",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلْعَلِيّ",
        label="Al-‘Aliyy",
        meaning="The Most High, the Exalted",
        usage="Raises spiritual and worldly status",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلْكَبِير",
        label="Al-Kabeer",
        meaning="The Most Great",
        usage="Instills awe and reverence",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلْحَفِيظ",
        label="Al-Hafeedh",
        meaning="The Preserver",
        usage="Provides protection and memory retention",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلْمُقِيت",
        label="Al-Muqeet",
        meaning="The Sustainer",
        usage="Grants energy and provision",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلْحسِيب",
        label="Al-Haseeb",
        meaning="The Reckoner",
        usage="Ensures justice and accountability",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلْجَلِيل",
        label="Al-Jaleel",
        meaning="The Majestic",
        usage="Inspires honor and dignity",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلْكَرِيم",
        label="Al-Kareem",
        meaning="The Most Generous, the Most Esteemed",
        usage="Grants abundance and kindness",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلرَّقِيب",
        label="Ar-Raqeeb",
        meaning="The Watchful",
        usage="Promotes mindfulness and caution",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلْمُجِيب",
        label="Al-Mujeeb",
        meaning="The Responsive One",
        usage="Answers prayers and requests",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلْوَاسِع",
        label="Al-Waasi’",
        meaning="The All-Encompassing, the Boundless",
        usage="Grants abundance and insight",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلْحَكِيم",
        label="Al-Hakeem",
        meaning="The All-Wise",
        usage="Grants wisdom and good judgment",
        citation="Hadith - Tirmidhi",
    ),
    NamedAttribute(
        display_form="ٱلْوَدُود",
        label="Al-Wadud",
        meaning="The Most Loving",
        usage="Brings love and affection",
        citation="Hadith - Tirmidhi",
    ),
)
