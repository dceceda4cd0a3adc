import logging
import uuid

from raqim.schemas.brain import (
    BrainStats,
    Decision,
    DecisionCreate,
    DecisionStatus,
    Project,
    ProjectCreate,
    ProjectStatus,
    Session,
    SessionCreate,
)

logger = logging.getLogger(__name__)


class BrainStore:
    """In-memory projects, conversation sessions and decision logs."""

    def __init__(self) -> None:
        self._projects: list[Project] = []
        self._sessions: list[Session] = []
        self._decisions: list[Decision] = []

    def list_projects(self) -> list[Project]:
        return list(self._projects)

    def create_project(self, data: ProjectCreate) -> Project:
        project = Project(id=uuid.uuid4().hex, **data.model_dump())
        self._projects.append(project)
        logger.info("Project %s created", project.id)
        return project

    def list_sessions(self) -> list[Session]:
        return list(self._sessions)

    def create_session(self, data: SessionCreate) -> Session:
        session = Session(id=uuid.uuid4().hex, **data.model_dump())
        self._sessions.append(session)
        logger.info("Session %s created", session.id)
        return session

    def list_decisions(self) -> list[Decision]:
        return list(self._decisions)

    def create_decision(self, data: DecisionCreate) -> Decision:
        decision = Decision(id=uuid.uuid4().hex, **data.model_dump())
        self._decisions.append(decision)
        logger.info("Decision %s created (%s)", decision.id, decision.status)
        return decision

    def stats(self) -> BrainStats:
        return BrainStats(
            projects_count=len(self._projects),
            sessions_count=len(self._sessions),
            decisions_count=len(self._decisions),
            active_projects=sum(1 for p in self._projects if p.status == ProjectStatus.ACTIVE),
            pending_decisions=sum(
                1 for d in self._decisions if d.status == DecisionStatus.PENDING
            ),
            implemented_decisions=sum(
                1 for d in self._decisions if d.status == DecisionStatus.IMPLEMENTED
            ),
        )

    def seed_samples(self) -> None:
        """Populate the store with demo records."""
        app_project = self.create_project(
            ProjectCreate(
                name="مشروع التطبيق الذكي",
                description="تطوير تطبيق ذكي للمساعدة الشخصية",
            )
        )
        self.create_project(
            ProjectCreate(
                name="محتوى وسائل التواصل",
                description="إنشاء محتوى لمنصات التواصل الاجتماعي",
            )
        )
        planning = self.create_session(
            SessionCreate(
                project_id=app_project.id,
                title="جلسة التخطيط الأولى",
                summary="مناقشة متطلبات المشروع الأساسية",
            )
        )
        planning.message_count = 15
        design = self.create_session(
            SessionCreate(
                project_id=app_project.id,
                title="جلسة تصميم الواجهات",
                summary="تصميم واجهات المستخدم",
            )
        )
        design.message_count = 8
        self.create_decision(
            DecisionCreate(
                project_id=app_project.id,
                session_id=planning.id,
                title="اختيار React للواجهة الأمامية",
                description="تم اختيار React كإطار عمل للواجهة الأمامية",
                reasoning="سهولة التطوير ودعم المجتمع الكبير",
                outcome="تم التنفيذ بنجاح",
                status=DecisionStatus.IMPLEMENTED,
            )
        )
        self.create_decision(
            DecisionCreate(
                project_id=app_project.id,
                title="استخدام PostgreSQL لقاعدة البيانات",
                description="اعتماد PostgreSQL كقاعدة بيانات رئيسية",
                reasoning="أداء عالي ودعم JSON",
            )
        )
