"""Field tables for each report category and for the general panel.

Rows are evaluated top to bottom. A row that writes a key already set by an
earlier row overwrites it (kidney ``bu``: BUN first, serum urea second).
"""

from app.extraction.models import FieldDefinition, FieldSchema, ReportCategory, ValueKind

INTEGER = ValueKind.INTEGER
DECIMAL = ValueKind.DECIMAL
CHOICE = ValueKind.CHOICE
FLAG = ValueKind.FLAG
THRESHOLD = ValueKind.THRESHOLD
PRESSURE = ValueKind.PRESSURE

MG_DL = ("mg/dl",)
ENZYME_UNITS = ("iu/l", "u/l")

_AGE = FieldDefinition("age", INTEGER, ("age",))

HEART_SCHEMA = FieldSchema(
    name="heart",
    fields=(
        _AGE,
        FieldDefinition("sex", CHOICE, choices=((0, ("female",)), (1, ("male",)))),
        FieldDefinition("cp", INTEGER, ("chest pain type", "chest pain", "cp")),
        FieldDefinition(
            "trestbps",
            INTEGER,
            ("resting blood pressure", "blood pressure", "trestbps", "bp"),
            units=("mmhg",),
        ),
        FieldDefinition(
            "chol", INTEGER, ("serum cholesterol", "cholesterol", "chol"), units=MG_DL
        ),
        FieldDefinition(
            "fbs",
            THRESHOLD,
            ("fasting blood sugar", "fbs", "glucose"),
            units=MG_DL,
            threshold=120,
        ),
        FieldDefinition("restecg", INTEGER, ("resting ecg", "restecg")),
        FieldDefinition(
            "thalach",
            INTEGER,
            ("maximum heart rate", "max heart rate", "heart rate", "thalach", "hr"),
            units=("bpm",),
        ),
        FieldDefinition(
            "exang",
            FLAG,
            ("exercise induced angina", "exercise angina", "exang"),
            flag_values=(1, 0),
        ),
        FieldDefinition("oldpeak", DECIMAL, ("st depression", "oldpeak")),
        FieldDefinition("slope", INTEGER, ("st slope", "slope")),
        FieldDefinition("ca", INTEGER, ("major vessels", "vessels", "ca")),
        FieldDefinition("thal", INTEGER, ("thalassemia", "thal")),
    ),
)

DIABETES_SCHEMA = FieldSchema(
    name="diabetes",
    fields=(
        _AGE,
        FieldDefinition("pregnancies", INTEGER, ("pregnancies", "pregnancy")),
        FieldDefinition(
            "glucose", INTEGER, ("plasma glucose", "glucose"), units=("mg/dl", "mmol/l")
        ),
        FieldDefinition(
            "blood_pressure",
            INTEGER,
            ("diastolic blood pressure", "blood pressure", "bp"),
            units=("mmhg",),
        ),
        FieldDefinition(
            "skin_thickness", INTEGER, ("skin thickness", "skin"), units=("mm",)
        ),
        FieldDefinition(
            "insulin", INTEGER, ("serum insulin", "insulin"), units=("uu/ml", "mu/l")
        ),
        FieldDefinition(
            "bmi", DECIMAL, ("body mass index", "bmi"), units=("kg/m2",)
        ),
        FieldDefinition(
            "diabetes_pedigree_function",
            DECIMAL,
            ("diabetes pedigree function", "diabetes pedigree", "pedigree", "dpf"),
        ),
    ),
)

KIDNEY_SCHEMA = FieldSchema(
    name="kidney",
    fields=(
        _AGE,
        FieldDefinition("bp", INTEGER, ("blood pressure", "bp"), units=("mmhg",)),
        FieldDefinition("sg", DECIMAL, ("specific gravity", "sg")),
        FieldDefinition("al", INTEGER, ("albumin", "al")),
        FieldDefinition("su", INTEGER, ("sugar", "su")),
        FieldDefinition(
            "rbc",
            CHOICE,
            choices=(
                ("normal", ("normal rbc", "rbc normal")),
                ("abnormal", ("abnormal rbc", "rbc abnormal")),
            ),
        ),
        FieldDefinition(
            "pc",
            CHOICE,
            choices=(
                ("normal", ("normal pc", "pc normal")),
                ("abnormal", ("abnormal pc", "pc abnormal")),
            ),
        ),
        FieldDefinition(
            "pcc",
            CHOICE,
            choices=(
                ("present", ("pcc present",)),
                ("notpresent", ("pcc notpresent", "pcc not present")),
            ),
        ),
        FieldDefinition(
            "ba",
            CHOICE,
            choices=(
                ("present", ("ba present",)),
                ("notpresent", ("ba notpresent", "ba not present")),
            ),
        ),
        FieldDefinition(
            "bgr",
            INTEGER,
            ("blood glucose random", "blood glucose", "bgr"),
            units=MG_DL,
        ),
        FieldDefinition("bu", DECIMAL, ("blood urea nitrogen", "bun"), units=MG_DL),
        FieldDefinition("bu", DECIMAL, ("serum urea", "urea"), units=MG_DL),
        FieldDefinition(
            "sc", DECIMAL, ("serum creatinine", "creatinine", "sc"), units=MG_DL
        ),
        FieldDefinition(
            "sod", DECIMAL, ("serum sodium", "sodium", "sod"), units=("meq/l", "mmol/l")
        ),
        FieldDefinition(
            "pot",
            DECIMAL,
            ("serum potassium", "potassium", "pot"),
            units=("meq/l", "mmol/l"),
        ),
        FieldDefinition(
            "hemo", DECIMAL, ("hemoglobin", "haemoglobin", "hemo"), units=("g/dl",)
        ),
        FieldDefinition("pcv", INTEGER, ("packed cell volume", "pcv")),
        FieldDefinition(
            "wc", INTEGER, ("white blood cell count", "white blood cell", "wbc", "wc")
        ),
        FieldDefinition(
            "rc", DECIMAL, ("red blood cell count", "rbc count", "rbc", "rc")
        ),
        FieldDefinition("htn", FLAG, ("hypertension", "htn")),
        FieldDefinition("dm", FLAG, ("diabetes mellitus", "dm")),
        FieldDefinition("cad", FLAG, ("coronary artery disease", "cad")),
        FieldDefinition(
            "appet",
            CHOICE,
            choices=(("good", ("good appetite",)), ("poor", ("poor appetite",))),
        ),
        FieldDefinition("pe", FLAG, ("pedal edema", "pe")),
        FieldDefinition("ane", FLAG, ("anemia", "anaemia", "ane")),
    ),
)

LIVER_SCHEMA = FieldSchema(
    name="liver",
    fields=(
        _AGE,
        FieldDefinition(
            "gender", CHOICE, choices=(("Female", ("female",)), ("Male", ("male",)))
        ),
        FieldDefinition(
            "total_bilirubin",
            DECIMAL,
            ("total bilirubin", "bilirubin total", "tbil", "tb"),
            units=MG_DL,
        ),
        FieldDefinition(
            "direct_bilirubin",
            DECIMAL,
            ("direct bilirubin", "bilirubin direct", "dbil", "db"),
            units=MG_DL,
        ),
        FieldDefinition(
            "alkaline_phosphotase",
            INTEGER,
            ("alkaline phosphatase", "alk phos", "alp"),
            units=ENZYME_UNITS,
        ),
        FieldDefinition(
            "alamine_aminotransferase",
            INTEGER,
            ("alanine aminotransferase", "alt", "sgpt"),
            units=ENZYME_UNITS,
        ),
        FieldDefinition(
            "aspartate_aminotransferase",
            INTEGER,
            ("aspartate aminotransferase", "ast", "sgot"),
            units=ENZYME_UNITS,
        ),
        FieldDefinition(
            "sgot_sgpt_ratio",
            DECIMAL,
            ("sgot/sgpt ratio", "sgot sgpt ratio", "ast/alt ratio"),
        ),
        FieldDefinition(
            "ggt",
            INTEGER,
            ("gamma glutamyl transferase", "ggt"),
            units=ENZYME_UNITS,
        ),
        FieldDefinition(
            "total_protiens",
            DECIMAL,
            ("total proteins", "total protein", "tp"),
            units=("g/dl",),
        ),
        FieldDefinition("albumin", DECIMAL, ("albumin", "alb"), units=("g/dl",)),
        FieldDefinition(
            "albumin_and_globulin_ratio",
            DECIMAL,
            (
                "albumin globulin ratio",
                "albumin/globulin ratio",
                "a/g ratio",
                "a:g ratio",
                "ag ratio",
                "a/g",
            ),
        ),
    ),
)

CATEGORY_SCHEMAS: dict[ReportCategory, FieldSchema] = {
    ReportCategory.HEART: HEART_SCHEMA,
    ReportCategory.DIABETES: DIABETES_SCHEMA,
    ReportCategory.KIDNEY: KIDNEY_SCHEMA,
    ReportCategory.LIVER: LIVER_SCHEMA,
}

# Denominators for confidence scoring. Fixed values, not derived from tables.
EXPECTED_FIELD_COUNTS: dict[ReportCategory, int] = {
    ReportCategory.HEART: 13,
    ReportCategory.DIABETES: 8,
    ReportCategory.KIDNEY: 24,
    ReportCategory.LIVER: 12,
}


def _panel_number(
    key: str,
    labels: tuple[str, ...],
    units: tuple[str, ...],
    kind: ValueKind = DECIMAL,
    mirrors: tuple[str, ...] = (),
) -> FieldDefinition:
    return FieldDefinition(key, kind, labels, units=units, loose=True, mirrors=mirrors)


PANEL_SCHEMA = FieldSchema(
    name="panel",
    fields=(
        _panel_number("glucose", ("glucose", "blood sugar", "sugar"), ("mg/dl", "mmol/l")),
        _panel_number("cholesterol", ("total cholesterol", "cholesterol"), MG_DL),
        _panel_number("hdl", ("hdl", "high-density lipoprotein"), MG_DL),
        _panel_number("ldl", ("ldl", "low-density lipoprotein"), MG_DL),
        _panel_number("triglycerides", ("triglycerides", "tg"), MG_DL),
        _panel_number("creatinine", ("creatinine", "cr"), MG_DL),
        _panel_number("bun", ("bun", "blood urea nitrogen", "urea"), MG_DL),
        _panel_number(
            "alt", ("alt", "alanine aminotransferase", "sgpt"), ENZYME_UNITS, mirrors=("sgpt",)
        ),
        _panel_number(
            "ast", ("ast", "aspartate aminotransferase", "sgot"), ENZYME_UNITS, mirrors=("sgot",)
        ),
        _panel_number("ggt", ("ggt", "gamma glutamyl transferase"), ENZYME_UNITS),
        FieldDefinition("sgot_sgpt_ratio", DECIMAL, ("sgot/sgpt", "ast/alt"), loose=True),
        _panel_number(
            "bilirubin",
            ("bilirubin total", "total bilirubin", "tbil"),
            MG_DL,
            mirrors=("bilirubin_total",),
        ),
        _panel_number("bilirubin_direct", ("bilirubin direct", "direct bilirubin"), MG_DL),
        _panel_number(
            "bilirubin_indirect", ("bilirubin indirect", "indirect bilirubin"), MG_DL
        ),
        _panel_number("hemoglobin", ("hemoglobin", "hb", "hgb"), ("g/dl",)),
        _panel_number(
            "wbc", ("wbc", "white blood cells", "leukocytes"), ("cells/ul", "k/ul")
        ),
        _panel_number(
            "rbc", ("rbc", "red blood cells", "erythrocytes"), ("cells/ul", "m/ul")
        ),
        _panel_number("platelets", ("platelets", "plt"), ("cells/ul", "k/ul")),
        FieldDefinition(
            "blood_pressure", PRESSURE, ("blood pressure", "bp"), units=("mmhg",)
        ),
        _panel_number("heart_rate", ("heart rate", "hr", "pulse"), ("bpm",), kind=INTEGER),
        _panel_number("spo2", ("spo2", "oxygen saturation"), ("%",), kind=INTEGER),
        _panel_number("temperature", ("temperature", "temp"), ("°c", "°f")),
        _panel_number("bmi", ("bmi", "body mass index"), ("kg/m2",)),
        _panel_number("weight", ("weight", "wt"), ("kg", "lbs")),
        _panel_number("height", ("height", "ht"), ("cm", "ft")),
        _panel_number("age", ("age",), ("years", "year", "yrs"), kind=INTEGER),
        _panel_number("albumin", ("albumin", "alb"), ("g/dl",)),
        _panel_number(
            "alkaline_phosphatase", ("alkaline phosphatase", "alp"), ENZYME_UNITS
        ),
        _panel_number("total_protein", ("total protein", "protein"), ("g/dl",)),
        _panel_number("globulin", ("globulin",), ("g/dl",)),
        FieldDefinition(
            "ag_ratio",
            DECIMAL,
            ("a:g ratio", "ag ratio", "a/g ratio", "a/g"),
            loose=True,
        ),
        _panel_number(
            "glomerular_filtration_rate",
            ("gfr", "egfr", "glomerular filtration rate"),
            ("ml/min",),
        ),
        _panel_number("urine_albumin", ("urine albumin", "microalbumin"), ("mg/l",)),
        _panel_number("ejection_fraction", ("ejection fraction", "ef"), ("%",)),
        _panel_number("lv_mass", ("lv mass",), ("g",)),
        _panel_number("stroke_volume", ("stroke volume", "sv"), ("ml",)),
        _panel_number("end_diastolic_volume", ("end diastolic volume", "edv"), ("ml",)),
        _panel_number("end_systolic_volume", ("end systolic volume", "esv"), ("ml",)),
        _panel_number(
            "fractional_shortening", ("fractional shortening", "fs"), ("%",)
        ),
    ),
)


def schema_fields(category: ReportCategory) -> tuple[str, ...]:
    """Key set a prediction model for ``category`` expects."""
    schema = CATEGORY_SCHEMAS.get(category)
    if schema is None:
        return ()
    return schema.keys


def expected_field_count(category: ReportCategory) -> int:
    count = EXPECTED_FIELD_COUNTS.get(category)
    if count is None:
        raise ValueError(f"No expected field count for category '{category.value}'")
    return count
