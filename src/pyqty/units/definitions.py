"""
pyqty.units.definitions
=======================

Static unit and prefix table consumed by :mod:`pyqty.units.registry`.

Each unit row is ``(atom, aliases, scalar, kind, numerator, denominator)``.
The first alias is the output name. ``numerator``/``denominator`` list the
base atoms one unit reduces to, ``scalar`` is the factor of that reduction.
"""

from __future__ import annotations

import math

from pyqty.core.unit import UNITY, PrefixDefinition, UnitDefinition

# ---------------------------------------------------------------------------
# Base atoms
# ---------------------------------------------------------------------------
METER = "<meter>"
KILOGRAM = "<kilogram>"
SECOND = "<second>"
MOLE = "<mole>"
AMPERE = "<ampere>"
RADIAN = "<radian>"
KELVIN = "<kelvin>"
TEMP_K = "<temp-K>"
BYTE = "<byte>"
DOLLAR = "<dollar>"
CANDELA = "<candela>"
EACH = "<each>"
STERADIAN = "<steradian>"
DECIBEL = "<decibel>"

BASE_UNITS = (
    METER, KILOGRAM, SECOND, MOLE, AMPERE, RADIAN, KELVIN, TEMP_K,
    BYTE, DOLLAR, CANDELA, EACH, STERADIAN, DECIBEL,
)

_M2 = (METER, METER)
_M3 = (METER, METER, METER)
_S2 = (SECOND, SECOND)
_S3 = (SECOND, SECOND, SECOND)
_M2_KG = (METER, METER, KILOGRAM)

# ---------------------------------------------------------------------------
# Prefixes (atom, aliases, scalar)
# ---------------------------------------------------------------------------
_PREFIX_ROWS = (
    ("<googol>", ("googol",), 1e100),
    ("<kibi>", ("Ki", "Kibi", "kibi"), 2.0 ** 10),
    ("<mebi>", ("Mi", "Mebi", "mebi"), 2.0 ** 20),
    ("<gibi>", ("Gi", "Gibi", "gibi"), 2.0 ** 30),
    ("<tebi>", ("Ti", "Tebi", "tebi"), 2.0 ** 40),
    ("<pebi>", ("Pi", "Pebi", "pebi"), 2.0 ** 50),
    ("<exi>", ("Ei", "Exi", "exi"), 2.0 ** 60),
    ("<zebi>", ("Zi", "Zebi", "zebi"), 2.0 ** 70),
    ("<yebi>", ("Yi", "Yebi", "yebi"), 2.0 ** 80),
    ("<yotta>", ("Y", "Yotta", "yotta"), 1e24),
    ("<zetta>", ("Z", "Zetta", "zetta"), 1e21),
    ("<exa>", ("E", "Exa", "exa"), 1e18),
    ("<peta>", ("P", "Peta", "peta"), 1e15),
    ("<tera>", ("T", "Tera", "tera"), 1e12),
    ("<giga>", ("G", "Giga", "giga"), 1e9),
    ("<mega>", ("M", "Mega", "mega"), 1e6),
    ("<kilo>", ("k", "kilo"), 1e3),
    ("<hecto>", ("h", "Hecto", "hecto"), 1e2),
    ("<deca>", ("da", "Deca", "deca", "deka"), 1e1),
    ("<deci>", ("d", "Deci", "deci"), 1e-1),
    ("<centi>", ("c", "Centi", "centi"), 1e-2),
    ("<milli>", ("m", "Milli", "milli"), 1e-3),
    # micro sign U+00B5 and greek mu U+03BC are distinct code points even after NFC
    ("<micro>", ("u", "μ", "µ", "Micro", "mc", "micro"), 1e-6),
    ("<nano>", ("n", "Nano", "nano"), 1e-9),
    ("<pico>", ("p", "Pico", "pico"), 1e-12),
    ("<femto>", ("f", "Femto", "femto"), 1e-15),
    ("<atto>", ("a", "Atto", "atto"), 1e-18),
    ("<zepto>", ("z", "Zepto", "zepto"), 1e-21),
    ("<yocto>", ("y", "Yocto", "yocto"), 1e-24),
)

# ---------------------------------------------------------------------------
# Units (atom, aliases, scalar, kind, numerator, denominator)
# ---------------------------------------------------------------------------
_UNIT_ROWS = (
    (UNITY, ("1", UNITY), 1.0, "", (), ()),

    # length
    (METER, ("m", "meter", "meters", "metre", "metres"), 1.0, "length", (METER,), ()),
    ("<inch>", ("in", "inch", "inches", '"'), 0.0254, "length", (METER,), ()),
    ("<foot>", ("ft", "foot", "feet", "'"), 0.3048, "length", (METER,), ()),
    ("<yard>", ("yd", "yard", "yards"), 0.9144, "length", (METER,), ()),
    ("<mile>", ("mi", "mile", "miles"), 1609.344, "length", (METER,), ()),
    ("<naut-mile>", ("nmi", "naut-mile"), 1852.0, "length", (METER,), ()),
    ("<league>", ("league", "leagues"), 4828.0, "length", (METER,), ()),
    ("<furlong>", ("furlong", "furlongs"), 201.2, "length", (METER,), ()),
    ("<rod>", ("rd", "rod", "rods"), 5.029, "length", (METER,), ()),
    ("<mil>", ("mil", "mils"), 0.0000254, "length", (METER,), ()),
    ("<angstrom>", ("ang", "angstrom", "angstroms"), 1e-10, "length", (METER,), ()),
    ("<fathom>", ("fathom", "fathoms"), 1.829, "length", (METER,), ()),
    ("<pica>", ("pica", "picas"), 0.00423333333, "length", (METER,), ()),
    ("<point>", ("point", "points"), 0.000352777778, "length", (METER,), ()),
    ("<redshift>", ("red-shift", "redshift"), 1.302773e26, "length", (METER,), ()),
    ("<AU>", ("AU", "astronomical-unit"), 149597900000.0, "length", (METER,), ()),
    ("<light-second>", ("ls", "light-second"), 299792500.0, "length", (METER,), ()),
    ("<light-minute>", ("lmin", "light-minute"), 17987550000.0, "length", (METER,), ()),
    ("<light-year>", ("ly", "light-year"), 9460528000000000.0, "length", (METER,), ()),
    ("<parsec>", ("pc", "parsec", "parsecs"), 30856780000000000.0, "length", (METER,), ()),
    ("<datamile>", ("DM", "datamile"), 1828.8, "length", (METER,), ()),

    # mass
    (KILOGRAM, ("kg", "kilogram", "kilograms"), 1.0, "mass", (KILOGRAM,), ()),
    ("<AMU>", ("AMU", "amu"), 1.660538921e-27, "mass", (KILOGRAM,), ()),
    ("<dalton>", ("Da", "Dalton", "Daltons", "dalton", "daltons"), 1.660538921e-27, "mass", (KILOGRAM,), ()),
    ("<slug>", ("slug", "slugs"), 14.5939029, "mass", (KILOGRAM,), ()),
    ("<short-ton>", ("tn", "ton", "short-ton"), 907.18474, "mass", (KILOGRAM,), ()),
    ("<metric-ton>", ("t", "tonne", "metric-ton"), 1000.0, "mass", (KILOGRAM,), ()),
    ("<carat>", ("ct", "carat", "carats"), 0.0002, "mass", (KILOGRAM,), ()),
    ("<pound>", ("lbs", "lb", "pound", "pounds", "#"), 0.45359237, "mass", (KILOGRAM,), ()),
    ("<ounce>", ("oz", "ounce", "ounces"), 0.0283495231, "mass", (KILOGRAM,), ()),
    ("<gram>", ("g", "gram", "grams", "gramme", "grammes"), 1e-3, "mass", (KILOGRAM,), ()),
    ("<grain>", ("grain", "grains", "gr"), 6.479891e-5, "mass", (KILOGRAM,), ()),
    ("<dram>", ("dram", "drams", "dr"), 0.0017718452, "mass", (KILOGRAM,), ()),
    ("<stone>", ("stone", "stones", "st"), 6.35029318, "mass", (KILOGRAM,), ()),

    # area
    ("<hectare>", ("hectare",), 10000.0, "area", _M2, ()),
    ("<acre>", ("acre", "acres"), 4046.85642, "area", _M2, ()),
    ("<sqft>", ("sqft",), 0.09290304, "area", _M2, ()),

    # volume
    ("<liter>", ("l", "L", "liter", "liters", "litre", "litres"), 0.001, "volume", _M3, ()),
    ("<gallon>", ("gal", "gallon", "gallons"), 0.0037854118, "volume", _M3, ()),
    ("<gallon-imp>", ("galimp", "gallon-imp", "gallons-imp"), 0.0045460900, "volume", _M3, ()),
    ("<quart>", ("qt", "quart", "quarts"), 0.00094635295, "volume", _M3, ()),
    ("<pint>", ("pt", "pint", "pints"), 0.000473176475, "volume", _M3, ()),
    ("<pint-imp>", ("pintimp", "pint-imp", "pints-imp"), 5.6826125e-4, "volume", _M3, ()),
    ("<cup>", ("cu", "cup", "cups"), 0.000236588238, "volume", _M3, ()),
    ("<fluid-ounce>", ("floz", "fluid-ounce", "fluid-ounces"), 2.95735297e-5, "volume", _M3, ()),
    ("<tablespoon>", ("tb", "tbsp", "tbs", "tablespoon", "tablespoons"), 1.47867648e-5, "volume", _M3, ()),
    ("<teaspoon>", ("tsp", "teaspoon", "teaspoons"), 4.92892161e-6, "volume", _M3, ()),
    ("<bushel>", ("bu", "bsh", "bushel", "bushels"), 0.035239072, "volume", _M3, ()),
    ("<oilbarrel>", ("bbl", "oilbarrel", "oilbarrels", "oil-barrel", "oil-barrels"), 0.158987294928, "volume", _M3, ()),
    ("<beerbarrel>", ("bl", "bl-us", "beerbarrel", "beerbarrels", "beer-barrel", "beer-barrels"), 0.1173477658, "volume", _M3, ()),
    ("<beerbarrel-imp>", ("blimp", "bl-imp", "beerbarrel-imp", "beerbarrels-imp", "beer-barrel-imp", "beer-barrels-imp"), 0.16365924, "volume", _M3, ()),

    # speed
    ("<kph>", ("kph",), 0.277777778, "speed", (METER,), (SECOND,)),
    ("<mph>", ("mph",), 0.44704, "speed", (METER,), (SECOND,)),
    ("<knot>", ("kt", "kn", "kts", "knot", "knots"), 0.514444444, "speed", (METER,), (SECOND,)),
    ("<fps>", ("fps",), 0.3048, "speed", (METER,), (SECOND,)),

    # acceleration
    ("<gee>", ("gee",), 9.80665, "acceleration", (METER,), _S2),
    ("<Gal>", ("Gal",), 1e-2, "acceleration", (METER,), _S2),

    # temperature differences
    (KELVIN, ("K", "degK", "kelvin", "Kelvin"), 1.0, "temperature", (KELVIN,), ()),
    ("<celsius>", ("°C", "degC", "celsius", "Celsius", "centigrade", "Centigrade", "ºC"), 1.0, "temperature", (KELVIN,), ()),
    ("<fahrenheit>", ("°F", "degF", "fahrenheit", "Fahrenheit", "ºF"), 5 / 9, "temperature", (KELVIN,), ()),
    ("<rankine>", ("°R", "degR", "rankine", "Rankine"), 5 / 9, "temperature", (KELVIN,), ()),

    # absolute temperatures
    (TEMP_K, ("tempK", "temp-K"), 1.0, "temperature", (TEMP_K,), ()),
    ("<temp-C>", ("tempC", "temp-C"), 1.0, "temperature", (TEMP_K,), ()),
    ("<temp-F>", ("tempF", "temp-F"), 5 / 9, "temperature", (TEMP_K,), ()),
    ("<temp-R>", ("tempR", "temp-R"), 5 / 9, "temperature", (TEMP_K,), ()),

    # time
    (SECOND, ("s", "sec", "secs", "second", "seconds"), 1.0, "time", (SECOND,), ()),
    ("<minute>", ("min", "mins", "minute", "minutes"), 60.0, "time", (SECOND,), ()),
    ("<hour>", ("h", "hr", "hrs", "hour", "hours"), 3600.0, "time", (SECOND,), ()),
    ("<day>", ("d", "day", "days"), 3600.0 * 24, "time", (SECOND,), ()),
    ("<week>", ("wk", "week", "weeks"), 7 * 3600.0 * 24, "time", (SECOND,), ()),
    ("<fortnight>", ("fortnight", "fortnights"), 1209600.0, "time", (SECOND,), ()),
    ("<year>", ("y", "yr", "year", "years", "annum"), 31556926.0, "time", (SECOND,), ()),
    ("<decade>", ("decade", "decades"), 315569260.0, "time", (SECOND,), ()),
    ("<century>", ("century", "centuries"), 3155692600.0, "time", (SECOND,), ()),

    # pressure
    ("<pascal>", ("Pa", "pascal", "Pascal"), 1.0, "pressure", (KILOGRAM,), (METER, SECOND, SECOND)),
    ("<bar>", ("bar", "bars"), 100000.0, "pressure", (KILOGRAM,), (METER, SECOND, SECOND)),
    ("<mmHg>", ("mmHg",), 133.322368, "pressure", (KILOGRAM,), (METER, SECOND, SECOND)),
    ("<inHg>", ("inHg",), 3386.3881472, "pressure", (KILOGRAM,), (METER, SECOND, SECOND)),
    ("<torr>", ("torr",), 133.322368, "pressure", (KILOGRAM,), (METER, SECOND, SECOND)),
    ("<atm>", ("atm", "ATM", "atmosphere", "atmospheres"), 101325.0, "pressure", (KILOGRAM,), (METER, SECOND, SECOND)),
    ("<psi>", ("psi",), 6894.76, "pressure", (KILOGRAM,), (METER, SECOND, SECOND)),
    ("<cmh2o>", ("cmH2O", "cmh2o"), 98.0638, "pressure", (KILOGRAM,), (METER, SECOND, SECOND)),
    ("<inh2o>", ("inH2O", "inh2o"), 249.082052, "pressure", (KILOGRAM,), (METER, SECOND, SECOND)),

    # viscosity
    ("<poise>", ("P", "poise"), 0.1, "viscosity", (KILOGRAM,), (METER, SECOND)),
    ("<stokes>", ("St", "stokes"), 1e-4, "viscosity", _M2, (SECOND,)),

    # substance
    (MOLE, ("mol", "mole"), 1.0, "substance", (MOLE,), ()),

    # concentration
    ("<molar>", ("M", "molar"), 1000.0, "molar_concentration", (MOLE,), _M3),
    ("<wtpercent>", ("wt%", "wtpercent"), 10.0, "molar_concentration", (KILOGRAM,), _M3),

    # activity
    ("<katal>", ("kat", "katal", "Katal"), 1.0, "activity", (MOLE,), (SECOND,)),
    ("<unit>", ("U", "enzUnit", "unit"), 16.667e-16, "activity", (MOLE,), (SECOND,)),

    # capacitance
    ("<farad>", ("F", "farad", "Farad"), 1.0, "capacitance",
     (SECOND, SECOND, SECOND, SECOND, AMPERE, AMPERE), (METER, METER, KILOGRAM)),

    # charge
    ("<coulomb>", ("C", "coulomb", "Coulomb"), 1.0, "charge", (AMPERE, SECOND), ()),
    ("<Ah>", ("Ah",), 3600.0, "charge", (AMPERE, SECOND), ()),
    ("<elementary-charge>", ("e",), 1.602176634e-19, "charge", (AMPERE, SECOND), ()),

    # current
    (AMPERE, ("A", "Ampere", "ampere", "amp", "amps"), 1.0, "current", (AMPERE,), ()),

    # conductance
    ("<siemens>", ("S", "Siemens", "siemens"), 1.0, "conductance",
     (SECOND, SECOND, SECOND, AMPERE, AMPERE), (KILOGRAM, METER, METER)),

    # inductance
    ("<henry>", ("H", "Henry", "henry"), 1.0, "inductance", _M2_KG, (SECOND, SECOND, AMPERE, AMPERE)),

    # potential
    ("<volt>", ("V", "Volt", "volt", "volts"), 1.0, "potential", _M2_KG, (SECOND, SECOND, SECOND, AMPERE)),

    # resistance; the ohm sign U+2126 is folded into U+03A9 by NFC
    ("<ohm>", ("Ω", "Ohm", "ohm"), 1.0, "resistance", _M2_KG, (SECOND, SECOND, SECOND, AMPERE, AMPERE)),

    # magnetism
    ("<weber>", ("Wb", "weber", "webers"), 1.0, "magnetism", _M2_KG, (SECOND, SECOND, AMPERE)),
    ("<tesla>", ("T", "tesla", "teslas"), 1.0, "magnetism", (KILOGRAM,), (SECOND, SECOND, AMPERE)),
    ("<gauss>", ("G", "gauss"), 1e-4, "magnetism", (KILOGRAM,), (SECOND, SECOND, AMPERE)),
    ("<maxwell>", ("Mx", "maxwell", "maxwells"), 1e-8, "magnetism", _M2_KG, (SECOND, SECOND, AMPERE)),
    ("<oersted>", ("Oe", "oersted", "oersteds"), 250.0 / math.pi, "magnetism", (AMPERE,), (METER,)),

    # energy
    ("<joule>", ("J", "joule", "Joule", "joules", "Joules"), 1.0, "energy", _M2_KG, _S2),
    ("<erg>", ("erg", "ergs"), 1e-7, "energy", _M2_KG, _S2),
    ("<btu>", ("BTU", "btu", "BTUs"), 1055.056, "energy", _M2_KG, _S2),
    ("<calorie>", ("cal", "calorie", "calories"), 4.18400, "energy", _M2_KG, _S2),
    ("<Calorie>", ("Cal", "Calorie", "Calories"), 4184.00, "energy", _M2_KG, _S2),
    ("<therm-US>", ("th", "therm", "therms", "Therm", "therm-US"), 105480400.0, "energy", _M2_KG, _S2),
    ("<Wh>", ("Wh",), 3600.0, "energy", _M2_KG, _S2),
    ("<electronvolt>", ("eV", "electronvolt", "electronvolts"), 1.602176634e-19, "energy", _M2_KG, _S2),

    # force
    ("<newton>", ("N", "Newton", "newton"), 1.0, "force", (KILOGRAM, METER), _S2),
    ("<dyne>", ("dyn", "dyne"), 1e-5, "force", (KILOGRAM, METER), _S2),
    ("<pound-force>", ("lbf", "pound-force"), 4.448222, "force", (KILOGRAM, METER), _S2),

    # frequency
    ("<hertz>", ("Hz", "hertz", "Hertz"), 1.0, "frequency", (UNITY,), (SECOND,)),

    # angle
    (RADIAN, ("rad", "radian", "radians"), 1.0, "angle", (RADIAN,), ()),
    ("<degree>", ("deg", "degree", "degrees"), math.pi / 180.0, "angle", (RADIAN,), ()),
    ("<arcminute>", ("arcmin", "arcminute", "arcminutes"), math.pi / 10800.0, "angle", (RADIAN,), ()),
    ("<arcsecond>", ("arcsec", "arcsecond", "arcseconds"), math.pi / 648000.0, "angle", (RADIAN,), ()),
    ("<gradian>", ("gon", "grad", "gradian", "grads"), math.pi / 200.0, "angle", (RADIAN,), ()),
    (STERADIAN, ("sr", "steradian", "steradians"), 1.0, "solid_angle", (STERADIAN,), ()),

    # rotation
    ("<rotation>", ("rotation",), 2.0 * math.pi, "angle", (RADIAN,), ()),
    ("<rpm>", ("rpm",), 2.0 * math.pi / 60.0, "angular_velocity", (RADIAN,), (SECOND,)),

    # information
    (BYTE, ("B", "byte", "bytes"), 1.0, "information", (BYTE,), ()),
    ("<bit>", ("b", "bit", "bits"), 0.125, "information", (BYTE,), ()),

    # information rate
    ("<Bps>", ("Bps",), 1.0, "information_rate", (BYTE,), (SECOND,)),
    ("<bps>", ("bps",), 0.125, "information_rate", (BYTE,), (SECOND,)),

    # currency
    (DOLLAR, ("USD", "dollar"), 1.0, "currency", (DOLLAR,), ()),
    ("<cents>", ("cents",), 0.01, "currency", (DOLLAR,), ()),

    # luminosity
    (CANDELA, ("cd", "candela"), 1.0, "luminosity", (CANDELA,), ()),
    ("<lumen>", ("lm", "lumen"), 1.0, "luminous_power", (CANDELA, STERADIAN), ()),
    ("<lux>", ("lux",), 1.0, "illuminance", (CANDELA, STERADIAN), _M2),

    # power
    ("<watt>", ("W", "watt", "watts"), 1.0, "power", _M2_KG, _S3),
    ("<volt-ampere>", ("VA", "volt-ampere"), 1.0, "power", _M2_KG, _S3),
    ("<volt-ampere-reactive>", ("var", "Var", "VAr", "VAR", "volt-ampere-reactive"), 1.0, "power", _M2_KG, _S3),
    ("<horsepower>", ("hp", "horsepower"), 745.699872, "power", _M2_KG, _S3),

    # radiation
    ("<gray>", ("Gy", "gray", "grays"), 1.0, "radiation", _M2, _S2),
    ("<roentgen>", ("R", "roentgen"), 0.009330, "radiation", _M2, _S2),
    ("<sievert>", ("Sv", "sievert", "sieverts"), 1.0, "radiation", _M2, _S2),
    ("<becquerel>", ("Bq", "becquerel", "becquerels"), 1.0, "radiation", (UNITY,), (SECOND,)),
    ("<curie>", ("Ci", "curie", "curies"), 3.7e10, "radiation", (UNITY,), (SECOND,)),

    # rate
    ("<cpm>", ("cpm",), 1.0 / 60.0, "rate", (EACH,), (SECOND,)),
    ("<dpm>", ("dpm",), 1.0 / 60.0, "rate", (EACH,), (SECOND,)),
    ("<bpm>", ("bpm",), 1.0 / 60.0, "rate", (EACH,), (SECOND,)),

    # resolution and typography
    ("<dot>", ("dot", "dots"), 1.0, "resolution", (EACH,), ()),
    ("<pixel>", ("pixel", "px"), 1.0, "resolution", (EACH,), ()),
    ("<ppi>", ("ppi",), 1 / 0.0254, "resolution", (EACH,), (METER,)),
    ("<dpi>", ("dpi",), 1 / 0.0254, "typography", (EACH,), (METER,)),

    # counting
    ("<cell>", ("cells", "cell"), 1.0, "counting", (EACH,), ()),
    (EACH, ("each",), 1.0, "counting", (EACH,), ()),
    ("<count>", ("count",), 1.0, "counting", (EACH,), ()),
    ("<base-pair>", ("bp", "base-pair"), 1.0, "counting", (EACH,), ()),
    ("<nucleotide>", ("nt", "nucleotide"), 1.0, "counting", (EACH,), ()),
    ("<molecule>", ("molecule", "molecules"), 1.0, "counting", (UNITY,), ()),

    # prefix-like multipliers
    ("<dozen>", ("doz", "dz", "dozen"), 12.0, "prefix_only", (EACH,), ()),
    ("<percent>", ("%", "percent"), 0.01, "prefix_only", (UNITY,), ()),
    ("<ppm>", ("ppm",), 1e-6, "prefix_only", (UNITY,), ()),
    ("<ppb>", ("ppb",), 1e-9, "prefix_only", (UNITY,), ()),
    ("<ppt>", ("ppt",), 1e-12, "prefix_only", (UNITY,), ()),
    ("<gross>", ("gross",), 144.0, "prefix_only", (EACH,), ()),

    # logarithmic
    (DECIBEL, ("dB", "decibel", "decibels"), 1.0, "logarithmic", (DECIBEL,), ()),
)

PREFIXES = tuple(PrefixDefinition(atom, aliases, scalar) for atom, aliases, scalar in _PREFIX_ROWS)

UNITS = tuple(
    UnitDefinition(atom, aliases, scalar, kind, numerator, denominator)
    for atom, aliases, scalar, kind, numerator, denominator in _UNIT_ROWS
)


__all__ = ["BASE_UNITS", "PREFIXES", "UNITS"]
