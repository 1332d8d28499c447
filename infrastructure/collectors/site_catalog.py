"""Built-in catalog of the school site's pages and features."""
from __future__ import annotations

SITE_PAGES: tuple[dict[str, object], ...] = (
    {
        "id": "home",
        "title": "Inicio",
        "content": "Bachillerato General Estatal Héroes de la Patria educación calidad formación integral",
        "url": "index.html",
        "type": "page",
        "category": "principal",
        "weight": 10,
    },
    {
        "id": "about",
        "title": "Conócenos",
        "content": "historia misión visión valores organigrama director infraestructura institucional",
        "url": "conocenos.html",
        "type": "page",
        "category": "institucional",
        "weight": 9,
    },
    {
        "id": "education",
        "title": "Oferta Educativa",
        "content": "plan estudios materias competencias capacitación trabajo perfil egreso admisión",
        "url": "oferta-educativa.html",
        "type": "page",
        "category": "académico",
        "weight": 9,
    },
    {
        "id": "services",
        "title": "Servicios",
        "content": "biblioteca laboratorios becas orientación servicios escolares trámites",
        "url": "servicios.html",
        "type": "page",
        "category": "servicios",
        "weight": 8,
    },
    {
        "id": "students",
        "title": "Portal Estudiantes",
        "content": "recursos académicos horarios actividades extracurriculares calculadora promedio",
        "url": "estudiantes.html",
        "type": "page",
        "category": "académico",
        "weight": 8,
    },
    {
        "id": "parents",
        "title": "Portal Padres",
        "content": "seguimiento académico comunicación docentes progreso hijos familia",
        "url": "padres.html",
        "type": "page",
        "category": "familia",
        "weight": 7,
    },
    {
        "id": "grades",
        "title": "Calificaciones",
        "content": "consulta calificaciones reportes académicos boletas evaluación notas",
        "url": "calificaciones.html",
        "type": "page",
        "category": "académico",
        "weight": 7,
    },
    {
        "id": "appointments",
        "title": "Sistema de Citas",
        "content": "agenda citas online departamentos orientación dirección servicios",
        "url": "citas.html",
        "type": "feature",
        "category": "servicios",
        "weight": 6,
    },
    {
        "id": "payments",
        "title": "Sistema de Pagos",
        "content": "pagos colegiaturas inscripciones online tarjeta transferencia seguro",
        "url": "pagos.html",
        "type": "feature",
        "category": "servicios",
        "weight": 6,
    },
    {
        "id": "downloads",
        "title": "Centro de Descargas",
        "content": "documentos formatos reglamentos recursos PDF oficiales descargar",
        "url": "descargas.html",
        "type": "feature",
        "category": "servicios",
        "weight": 5,
    },
    {
        "id": "community",
        "title": "Comunidad",
        "content": "noticias eventos actividades participación comunidad escolar",
        "url": "comunidad.html",
        "type": "page",
        "category": "social",
        "weight": 5,
    },
    {
        "id": "graduates",
        "title": "Egresados",
        "content": "testimonios egresados éxito profesional logros trayectoria",
        "url": "egresados.html",
        "type": "page",
        "category": "social",
        "weight": 4,
    },
    {
        "id": "jobs",
        "title": "Bolsa de Trabajo",
        "content": "empleo oportunidades laborales trabajos vacantes empresas",
        "url": "bolsa-trabajo.html",
        "type": "feature",
        "category": "servicios",
        "weight": 4,
    },
    {
        "id": "calendar",
        "title": "Calendario Escolar",
        "content": "calendario escolar eventos fechas importantes actividades programación",
        "url": "calendario.html",
        "type": "feature",
        "category": "académico",
        "weight": 6,
    },
    {
        "id": "contact",
        "title": "Contacto",
        "content": "contacto dirección teléfono email ubicación horarios atención",
        "url": "contacto.html",
        "type": "page",
        "category": "información",
        "weight": 7,
    },
)

SITE_FEATURES: tuple[dict[str, object], ...] = (
    {
        "id": "chatbot",
        "title": "Chatbot Asistente",
        "content": "chatbot asistente virtual ayuda consultas respuestas automáticas inteligente",
        "url": "#chatbot",
        "type": "feature",
        "category": "herramientas",
        "weight": 8,
    },
    {
        "id": "login",
        "title": "Iniciar Sesión",
        "content": "login acceso cuenta usuario contraseña autenticación sesión",
        "url": "#login",
        "type": "feature",
        "category": "cuenta",
        "weight": 6,
    },
    {
        "id": "dashboard",
        "title": "Dashboard Administrativo",
        "content": "dashboard administración panel control gestión estadísticas",
        "url": "admin-dashboard.html",
        "type": "feature",
        "category": "admin",
        "weight": 5,
        "requireAuth": True,
    },
)

__all__ = ["SITE_PAGES", "SITE_FEATURES"]
