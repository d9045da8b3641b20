"""
Local FAQ table.

Canned answers for the most common questions, grouped by legal category.
A match here bypasses the generative model's brief answer.
"""

from legal_assistant.models.enums import LegalCategory
from legal_assistant.models.question_models import FAQEntry

FAQ_DATABASE: dict[LegalCategory, tuple[FAQEntry, ...]] = {
    LegalCategory.CIVIL: (
        FAQEntry(
            id="civil-1",
            question="¿Cómo puedo reclamar daños y perjuicios?",
            answer=(
                "Para reclamar daños y perjuicios debe demostrar: 1) El daño sufrido cuantificable, "
                "2) La responsabilidad del demandado (culpa o negligencia), 3) El nexo causal entre la "
                "acción y el daño. Puede presentar una demanda ante los juzgados civiles. El plazo "
                "general es de 5 años desde el evento dañoso."
            ),
            category=LegalCategory.CIVIL,
            keywords=("daños", "perjuicios", "reclamación", "indemnización", "responsabilidad civil"),
        ),
        FAQEntry(
            id="civil-2",
            question="¿Cuál es el plazo para presentar una demanda civil?",
            answer=(
                "El plazo general de prescripción para acciones civiles es de 5 años desde que el "
                "titular conoce o debería conocer el daño y quién es responsable. Sin embargo, existen "
                "plazos especiales: accidentes de tráfico (1 año), daños en edificios (3 años), etc. "
                "Es crucial actuar rápido para no perder derechos."
            ),
            category=LegalCategory.CIVIL,
            keywords=("plazo", "prescripción", "demanda", "límite de tiempo"),
        ),
        FAQEntry(
            id="civil-3",
            question="¿Qué debo hacer si tengo un conflicto contractual?",
            answer=(
                "Ante un conflicto contractual: 1) Revisar el contrato íntegramente, 2) Contactar a la "
                "otra parte por escrito (email, burofax), 3) Intentar resolver amistosamente, 4) Si "
                "falla, iniciar arbitraje o mediación, 5) En último caso, demanda civil. Conserve toda "
                "la documentación y correspondencia."
            ),
            category=LegalCategory.CIVIL,
            keywords=("contrato", "conflicto", "incumplimiento", "obligaciones"),
        ),
    ),
    LegalCategory.PENAL: (
        FAQEntry(
            id="penal-1",
            question="¿Cuáles son mis derechos si me detienen?",
            answer=(
                "Si le detienen tiene derecho a: 1) Ser informado de sus derechos en un idioma que "
                "entienda, 2) Guardar silencio, 3) Tener un abogado designado gratuitamente, 4) No ser "
                "tratado de forma inhumana, 5) Comunicarse con un familiar. La detención máxima es de "
                "72 horas; después debe intervenir un juez."
            ),
            category=LegalCategory.PENAL,
            keywords=("detención", "derechos", "abogado", "interrogatorio", "custodia policial"),
        ),
        FAQEntry(
            id="penal-2",
            question="¿Qué diferencia hay entre falta y delito?",
            answer=(
                "Las infracciones leves se sancionan con multa o trabajos en beneficio de la comunidad. "
                "Los delitos son infracciones graves con penas de prisión, multa o ambas. Los delitos "
                "prescriben entre 2 y 20 años según su gravedad."
            ),
            category=LegalCategory.PENAL,
            keywords=("falta", "delito", "pena", "prisión", "multa", "infracción"),
        ),
    ),
    LegalCategory.LABORAL: (
        FAQEntry(
            id="laboral-1",
            question="¿Puede mi empleador despedirme sin justa causa?",
            answer=(
                "El despido debe tener causa justificada. Un despido sin causa puede declararse "
                "improcedente o nulo, con derecho a readmisión o indemnización y, en su caso, a "
                "salarios de tramitación. Debe presentar la papeleta de conciliación en 20 días "
                "hábiles desde la comunicación del despido."
            ),
            category=LegalCategory.LABORAL,
            keywords=("despido", "causa", "nulo", "readmisión", "indemnización", "trabajador"),
        ),
        FAQEntry(
            id="laboral-2",
            question="¿Cuál es mi derecho a vacaciones y descanso?",
            answer=(
                "Por ley tiene derecho a: 1) Mínimo 30 días naturales de vacaciones anuales, 2) Un "
                "descanso semanal mínimo de día y medio, 3) 14 festivos al año, 4) Permisos retribuidos "
                "para circunstancias especiales (matrimonio, fallecimiento de familiar, etc.)."
            ),
            category=LegalCategory.LABORAL,
            keywords=("vacaciones", "descanso", "días", "festivos", "permiso"),
        ),
    ),
    LegalCategory.ADMINISTRATIVO: (
        FAQEntry(
            id="admin-1",
            question="¿Cómo recurro una decisión administrativa?",
            answer=(
                "Ante una decisión administrativa desfavorable: 1) Recurso de reposición ante la misma "
                "administración (1 mes), 2) Recurso de alzada ante el órgano superior cuando el acto no "
                "agota la vía administrativa (1 mes), 3) Agotada la vía administrativa, recurso ante "
                "los juzgados contencioso-administrativos. En casos urgentes puede pedir medidas cautelares."
            ),
            category=LegalCategory.ADMINISTRATIVO,
            keywords=("recurso", "administración", "reposición", "alzada", "decisión"),
        ),
    ),
    LegalCategory.MERCANTIL: (
        FAQEntry(
            id="mercantil-1",
            question="¿Qué es un contrato mercantil y cuáles son mis obligaciones?",
            answer=(
                "Un contrato mercantil es un acuerdo entre empresarios para realizar operaciones "
                "comerciales y se rige por el Código de Comercio. Obligaciones: cumplir los términos "
                "acordados, pagar en plazo, mantener la calidad pactada y resolver disputas según lo "
                "previsto. El incumplimiento puede dar lugar a una demanda."
            ),
            category=LegalCategory.MERCANTIL,
            keywords=("contrato", "mercantil", "comercio", "obligaciones", "acuerdo"),
        ),
    ),
    LegalCategory.FAMILIA: (
        FAQEntry(
            id="familia-1",
            question="¿Cómo divorciarse? ¿Cuál es el proceso?",
            answer=(
                "Hay dos vías: 1) Divorcio de mutuo acuerdo, más rápido y económico, 2) Divorcio "
                "contencioso, si hay desacuerdo sobre custodia, pensión o bienes, que requiere juicio. "
                "Ambos necesitan trámite judicial o, si no hay hijos menores y hay acuerdo, notarial."
            ),
            category=LegalCategory.FAMILIA,
            keywords=("divorcio", "matrimonio", "custodia", "pensión", "bienes"),
        ),
        FAQEntry(
            id="familia-2",
            question="¿Cómo funciona la custodia de menores?",
            answer=(
                "La custodia puede ser compartida o exclusiva. El juez decide según el interés superior "
                "del menor y fija un régimen de visitas. El progenitor no custodio suele pagar pensión "
                "de alimentos. Los menores con suficiente madurez, y siempre los mayores de 12 años, "
                "deben ser oídos."
            ),
            category=LegalCategory.FAMILIA,
            keywords=("custodia", "menores", "hijos", "padres", "visitas", "pensión"),
        ),
    ),
    LegalCategory.TRIBUTARIO: (),
}

# Keywords used to guess a category without calling the model
CATEGORY_KEYWORDS: dict[LegalCategory, tuple[str, ...]] = {
    LegalCategory.CIVIL: ("daños", "perjuicios", "responsabilidad civil", "indemnización", "accidente", "contrato"),
    LegalCategory.PENAL: ("delito", "crimen", "robo", "fraude", "detención", "acusación", "antecedentes"),
    LegalCategory.LABORAL: ("despido", "salario", "contrato laboral", "horas", "vacaciones", "trabajador"),
    LegalCategory.ADMINISTRATIVO: ("ayuntamiento", "administración", "recurso", "licencia", "permiso"),
    LegalCategory.MERCANTIL: ("empresa", "comercio", "negocio", "proveedor", "cliente", "factura"),
    LegalCategory.FAMILIA: ("divorcio", "custodia", "pensión", "herencia", "matrimonio", "hijos"),
    LegalCategory.TRIBUTARIO: ("impuesto", "hacienda", "iva", "irpf", "declaración de la renta", "tributo"),
}


def faqs_for_category(category: LegalCategory) -> tuple[FAQEntry, ...]:
    return FAQ_DATABASE.get(category, ())


def all_faqs() -> list[FAQEntry]:
    return [faq for entries in FAQ_DATABASE.values() for faq in entries]
