"""Built-in locale tables.

Weekday lists start on Sunday to match ``CalendarBreakdown.weekday``.
"""
from __future__ import annotations

from datefmt.models.locale import DayPeriod, LocaleTable


def _words(text: str) -> tuple[str, ...]:
    return tuple(text.split())


EN = LocaleTable(
    code="en",
    month_names_full=_words(
        "January February March April May June July August September October November December"
    ),
    month_names_short=_words("Jan Feb Mar Apr May Jun Jul Aug Sep Oct Nov Dec"),
    weekday_names_full=_words("Sunday Monday Tuesday Wednesday Thursday Friday Saturday"),
    weekday_names_abbrev=_words("Sun Mon Tue Wed Thu Fri Sat"),
    weekday_names_minimal=_words("Su Mo Tu We Th Fr Sa"),
    day_period=DayPeriod(am="am", pm="pm"),
)

BE = LocaleTable(
    code="be",
    month_names_full=_words(
        "студзень люты сакавік красавік травень чэрвень "
        "ліпень жнівень верасень кастрычнік лістапад снежань"
    ),
    month_names_genitive=_words(
        "студзеня лютага сакавіка красавіка траўня чэрвеня "
        "ліпеня жніўня верасня кастрычніка лістапада снежня"
    ),
    month_names_short=_words("студ лют сак крас трав чэрв ліп жнів вер каст ліст снеж"),
    weekday_names_full=_words("нядзеля панядзелак аўторак серада чацвер пятніца субота"),
    weekday_names_abbrev=_words("нд пн ат ср чц пт сб"),
    weekday_names_minimal=_words("Нд Пн Ат Ср Чц Пт Сб"),
    day_period=DayPeriod(am="раніцы", pm="вечара", am_upper="раніцы", pm_upper="вечара"),
)

CS = LocaleTable(
    code="cs",
    month_names_full=_words(
        "leden únor březen duben květen červen červenec srpen září říjen listopad prosinec"
    ),
    month_names_genitive=_words(
        "ledna února března dubna května června července srpna září října listopadu prosince"
    ),
    month_names_short=_words("led úno bře dub kvě čvn čvc srp zář říj lis pro"),
    weekday_names_full=_words("neděle pondělí úterý středa čtvrtek pátek sobota"),
    weekday_names_abbrev=_words("ned pon úte stř čtv pát sob"),
    weekday_names_minimal=_words("Ne Po Út St Čt Pá So"),
    day_period=DayPeriod(am="dop.", pm="odp.", am_upper="DOP.", pm_upper="ODP."),
)

KK = LocaleTable(
    code="kk",
    month_names_full=_words(
        "қаңтар ақпан наурыз сәуір мамыр маусым шілде тамыз қыркүйек қазан қараша желтоқсан"
    ),
    month_names_short=_words("қаң ақп нау сәу мам мау шіл там қыр қаз қар жел"),
    weekday_names_full=_words("жексенбі дүйсенбі сейсенбі сәрсенбі бейсенбі жұма сенбі"),
    weekday_names_abbrev=_words("жек дүй сей сәр бей жұм сен"),
    weekday_names_minimal=_words("жк дй сй ср бй жм сн"),
    day_period=DayPeriod(am="тд", pm="тк"),
)

PL = LocaleTable(
    code="pl",
    month_names_full=_words(
        "styczeń luty marzec kwiecień maj czerwiec "
        "lipiec sierpień wrzesień październik listopad grudzień"
    ),
    month_names_genitive=_words(
        "stycznia lutego marca kwietnia maja czerwca "
        "lipca sierpnia września października listopada grudnia"
    ),
    month_names_short=_words("sty lut mar kwi maj cze lip sie wrz paź lis gru"),
    weekday_names_full=_words("niedziela poniedziałek wtorek środa czwartek piątek sobota"),
    weekday_names_abbrev=_words("ndz pn wt śr czw pt sb"),
    weekday_names_minimal=_words("Nd Pn Wt Śr Cz Pt So"),
    # Polish marks only the morning.
    day_period=DayPeriod(am="rano", pm="", am_upper="rano", pm_upper=""),
)

RU = LocaleTable(
    code="ru",
    month_names_full=_words(
        "январь февраль март апрель май июнь июль август сентябрь октябрь ноябрь декабрь"
    ),
    month_names_genitive=_words(
        "января февраля марта апреля мая июня июля августа сентября октября ноября декабря"
    ),
    month_names_short=_words("янв фев мар апр май июн июл авг сен окт ноя дек"),
    weekday_names_full=_words("воскресенье понедельник вторник среда четверг пятница суббота"),
    weekday_names_abbrev=_words("вс пн вт ср чт пт сб"),
    weekday_names_minimal=_words("Вс Пн Вт Ср Чт Пт Сб"),
    day_period=DayPeriod(am="утра", pm="вечера", am_upper="утра", pm_upper="вечера"),
)

TR = LocaleTable(
    code="tr",
    month_names_full=_words(
        "Ocak Şubat Mart Nisan Mayıs Haziran Temmuz Ağustos Eylül Ekim Kasım Aralık"
    ),
    month_names_short=_words("Oca Şub Mar Nis May Haz Tem Ağu Eyl Eki Kas Ara"),
    weekday_names_full=_words("Pazar Pazartesi Salı Çarşamba Perşembe Cuma Cumartesi"),
    weekday_names_abbrev=_words("Paz Pts Sal Çar Per Cum Cts"),
    weekday_names_minimal=_words("Pz Pt Sa Ça Pe Cu Ct"),
    day_period=DayPeriod(am="öö", pm="ös"),
)

TT = LocaleTable(
    code="tt",
    month_names_full=_words(
        "гыйнвар февраль март апрель май июнь июль август сентябрь октябрь ноябрь декабрь"
    ),
    month_names_short=_words("гыйн фев мар апр май июн июл авг сен окт ноя дек"),
    weekday_names_full=_words("якшәмбе дүшәмбе сишәмбе чәршәмбе пәнҗешәмбе җомга шимбә"),
    weekday_names_abbrev=_words("якш дүш сиш чәр пән җом шим"),
    weekday_names_minimal=_words("як дү си чә пә җо ши"),
    # Tatar uses the 24-hour clock and leaves both halves unmarked.
    day_period=DayPeriod(am="", pm=""),
)

UK = LocaleTable(
    code="uk",
    month_names_full=_words(
        "січень лютий березень квітень травень червень "
        "липень серпень вересень жовтень листопад грудень"
    ),
    month_names_genitive=_words(
        "січня лютого березня квітня травня червня "
        "липня серпня вересня жовтня листопада грудня"
    ),
    month_names_short=_words("січ лют бер квіт трав черв лип серп вер жовт лист груд"),
    weekday_names_full=_words("неділя понеділок вівторок середа четвер пʼятниця субота"),
    weekday_names_abbrev=_words("нд пн вт ср чт пт сб"),
    weekday_names_minimal=_words("Нд Пн Вт Ср Чт Пт Сб"),
    day_period=DayPeriod(am="ранку", pm="вечора", am_upper="ранку", pm_upper="вечора"),
)

LOCALE_TABLES: dict[str, LocaleTable] = {
    table.code: table for table in (EN, BE, CS, KK, PL, RU, TR, TT, UK)
}
