"""
Curated datasets served when an upstream source is unavailable.

Dates are computed relative to ``now`` so the data always looks current:
bills were introduced weeks ago, events are upcoming.

Responsibility: Static bills, news, legislators and civic events for TX-23
"""

from datetime import datetime, timedelta
from typing import List, Optional

from ..models.bill import Bill, BillProgress, VotingRecord
from ..models.event import CivicEvent
from ..models.legislator import Legislator
from ..models.news import NewsArticle
from ..utils.clock import utcnow


def _ago(now: datetime, days: float = 0, hours: float = 0) -> datetime:
    return now - timedelta(days=days, hours=hours)


def _ahead(now: datetime, days: float = 0, hours: float = 0) -> datetime:
    return now + timedelta(days=days, hours=hours)


def _progress(stage: int) -> BillProgress:
    """Progress flags for a bill that reached ``stage`` (0 introduced .. 4 signed)."""
    return BillProgress(
        committee=stage >= 1,
        passed_house=stage >= 2,
        passed_senate=stage >= 3,
        signed=stage >= 4,
    )


def _vote(now: datetime, days: int, chamber: str, yes: int, no: int) -> VotingRecord:
    return VotingRecord(
        date=_ago(now, days).date().isoformat(),
        chamber=chamber,
        result="Passed",
        votes_for=yes,
        votes_against=no,
    )


def fallback_bills(now: Optional[datetime] = None) -> List[Bill]:
    """Federal (119th Congress), Texas (89th Legislature) and TX-23 district bills."""
    now = now or utcnow()
    return [
        Bill(
            id="hr1-119",
            title="For the People Act of 2025",
            summary="To expand Americans' access to the ballot box and reduce the influence of big money in politics, and for other purposes.",
            summary_es="Para expandir el acceso de los estadounidenses a las urnas y reducir la influencia del dinero en la política.",
            status="passed_house",
            bill_type="H.R.",
            jurisdiction="federal",
            sponsor="Rep. John Sarbanes (D-MD)",
            introduced_date=_ago(now, 89),
            last_action="Passed House, referred to Senate Committee on Rules and Administration",
            last_action_date=_ago(now, 12),
            url="https://www.congress.gov/bill/119th-congress/house-bill/1",
            categories=["voting-rights", "campaign-finance", "ethics"],
            impact_tags=["democracy", "voting", "ethics"],
            progress=_progress(2),
            voting_history=[_vote(now, 12, "House", 220, 210)],
        ),
        Bill(
            id="hr2-119",
            title="SECURE 2.0 Act",
            summary="Securing a Strong Retirement Act of 2025 to enhance retirement security for American workers.",
            summary_es="Ley para asegurar una jubilación sólida de 2025 para mejorar la seguridad de jubilación de los trabajadores estadounidenses.",
            status="signed",
            bill_type="H.R.",
            jurisdiction="federal",
            sponsor="Rep. Richard Neal (D-MA)",
            introduced_date=_ago(now, 156),
            last_action="Signed into law",
            last_action_date=_ago(now, 8),
            url="https://www.congress.gov/bill/119th-congress/house-bill/2",
            categories=["retirement", "social-security", "pensions"],
            impact_tags=["retirement", "workers", "benefits"],
            progress=_progress(4),
            voting_history=[
                _vote(now, 45, "House", 414, 5),
                _vote(now, 18, "Senate", 76, 2),
            ],
        ),
        Bill(
            id="hr3-119",
            title="Lower Drug Costs Now Act",
            summary="To establish a fair price negotiation program, protect taxpayers from excessive drug price increases, and establish market competition through biosimilars.",
            summary_es="Para establecer un programa de negociación de precios justos y proteger a los contribuyentes de aumentos excesivos de precios de medicamentos.",
            status="in_committee",
            bill_type="H.R.",
            jurisdiction="federal",
            sponsor="Rep. Frank Pallone Jr. (D-NJ)",
            introduced_date=_ago(now, 67),
            last_action="Referred to House Committee on Energy and Commerce",
            last_action_date=_ago(now, 34),
            url="https://www.congress.gov/bill/119th-congress/house-bill/3",
            categories=["healthcare", "prescription-drugs", "medicare"],
            impact_tags=["healthcare", "affordability", "seniors"],
            progress=_progress(1),
        ),
        Bill(
            id="s1-119",
            title="Freedom to Vote Act",
            summary="To expand access to the ballot box, reduce the influence of big money in politics, strengthen ethics rules for public servants, and implement other anti-corruption measures.",
            summary_es="Para expandir el acceso a las urnas, reducir la influencia del dinero en la política y fortalecer las reglas éticas.",
            status="in_committee",
            bill_type="S.",
            jurisdiction="federal",
            sponsor="Sen. Amy Klobuchar (D-MN)",
            introduced_date=_ago(now, 78),
            last_action="Committee hearing scheduled",
            last_action_date=_ago(now, 6),
            url="https://www.congress.gov/bill/119th-congress/senate-bill/1",
            categories=["voting-rights", "campaign-finance", "ethics"],
            impact_tags=["democracy", "voting", "corruption"],
            progress=_progress(1),
        ),
        Bill(
            id="s2-119",
            title="Climate Action Now Act",
            summary="To require the President to develop and update annually a plan for the United States to meet its nationally determined contribution under the Paris Agreement.",
            summary_es="Para requerir que el Presidente desarrolle un plan para que Estados Unidos cumpla con su contribución bajo el Acuerdo de París.",
            status="passed_senate",
            bill_type="S.",
            jurisdiction="federal",
            sponsor="Sen. Edward Markey (D-MA)",
            introduced_date=_ago(now, 98),
            last_action="Passed Senate, referred to House",
            last_action_date=_ago(now, 15),
            url="https://www.congress.gov/bill/119th-congress/senate-bill/2",
            categories=["climate", "environment", "energy"],
            impact_tags=["climate", "environment", "jobs"],
            progress=BillProgress(committee=True, passed_senate=True),
            voting_history=[_vote(now, 15, "Senate", 51, 49)],
        ),
        Bill(
            id="tx-hb1-89",
            title="Texas State Budget Act for 2025-2026",
            summary="The general appropriations act for the state of Texas, allocating funds for education, healthcare, infrastructure, and other essential services.",
            summary_es="La ley de asignaciones generales para el estado de Texas, asignando fondos para educación, salud, infraestructura y otros servicios esenciales.",
            status="signed",
            bill_type="H.B.",
            jurisdiction="state",
            sponsor="Rep. Greg Bonnen (R-Friendswood)",
            introduced_date=_ago(now, 178),
            last_action="Signed by Governor Abbott",
            last_action_date=_ago(now, 32),
            url="https://capitol.texas.gov/BillLookup/History.aspx?LegSess=89R&Bill=HB1",
            categories=["budget", "appropriations", "state-funding"],
            impact_tags=["education", "healthcare", "infrastructure"],
            progress=_progress(4),
            voting_history=[
                _vote(now, 78, "House", 142, 8),
                _vote(now, 45, "Senate", 29, 2),
            ],
        ),
        Bill(
            id="tx-hb2-89",
            title="Texas Border Security Enhancement Act",
            summary="To enhance border security measures, increase funding for border patrol operations, and improve coordination between state and federal agencies.",
            summary_es="Para mejorar las medidas de seguridad fronteriza, aumentar fondos para operaciones de patrulla fronteriza y mejorar la coordinación entre agencias estatales y federales.",
            status="passed_house",
            bill_type="H.B.",
            jurisdiction="state",
            sponsor="Rep. Ryan Guillen (R-Rio Grande City)",
            introduced_date=_ago(now, 67),
            last_action="Passed House, referred to Senate Committee on Border Security",
            last_action_date=_ago(now, 23),
            url="https://capitol.texas.gov/BillLookup/History.aspx?LegSess=89R&Bill=HB2",
            categories=["border-security", "public-safety", "immigration"],
            impact_tags=["security", "border", "law-enforcement"],
            progress=_progress(2),
            voting_history=[_vote(now, 23, "House", 98, 52)],
        ),
        Bill(
            id="tx-sb3-89",
            title="Texas Public Education Funding Reform Act",
            summary="To reform the public school finance system, increase per-pupil funding, and provide additional resources for rural and high-poverty districts.",
            summary_es="Para reformar el sistema de financiamiento de escuelas públicas, aumentar fondos por estudiante y proporcionar recursos adicionales para distritos rurales y de alta pobreza.",
            status="in_committee",
            bill_type="S.B.",
            jurisdiction="state",
            sponsor="Sen. Brandon Creighton (R-Conroe)",
            introduced_date=_ago(now, 89),
            last_action="Committee hearing in Senate Education",
            last_action_date=_ago(now, 11),
            url="https://capitol.texas.gov/BillLookup/History.aspx?LegSess=89R&Bill=SB3",
            categories=["education", "school-finance", "public-schools"],
            impact_tags=["education", "students", "funding"],
            progress=_progress(1),
        ),
        Bill(
            id="hr4829-119",
            title="Border Water Infrastructure Improvement Act",
            summary="To improve water infrastructure along the Texas-Mexico border, with specific provisions for communities in TX-23 including Del Rio, Eagle Pass, and Uvalde.",
            summary_es="Para mejorar la infraestructura de agua a lo largo de la frontera Texas-México, con provisiones específicas para comunidades en TX-23.",
            status="passed_house",
            bill_type="H.R.",
            jurisdiction="district",
            sponsor="Rep. Tony Gonzales (R-TX-23)",
            introduced_date=_ago(now, 56),
            last_action="Passed House, sent to Senate Environment and Public Works Committee",
            last_action_date=_ago(now, 9),
            url="https://www.congress.gov/bill/119th-congress/house-bill/4829",
            categories=["infrastructure", "water", "border-communities"],
            impact_tags=["water", "infrastructure", "border"],
            progress=_progress(2),
            voting_history=[_vote(now, 9, "House", 289, 134)],
        ),
        Bill(
            id="hr5167-119",
            title="Rural Healthcare Access Improvement Act",
            summary="To address critical healthcare shortages in rural areas of TX-23, including telemedicine expansion and healthcare provider incentives for underserved communities.",
            summary_es="Para abordar la escasez crítica de atención médica en áreas rurales de TX-23, incluyendo expansión de telemedicina e incentivos para proveedores.",
            status="in_committee",
            bill_type="H.R.",
            jurisdiction="district",
            sponsor="Rep. Tony Gonzales (R-TX-23)",
            introduced_date=_ago(now, 34),
            last_action="Referred to House Committee on Energy and Commerce, Subcommittee on Health",
            last_action_date=_ago(now, 19),
            url="https://www.congress.gov/bill/119th-congress/house-bill/5167",
            categories=["healthcare", "rural", "telemedicine"],
            impact_tags=["healthcare", "rural", "access"],
            progress=_progress(1),
        ),
        Bill(
            id="hr4-119",
            title="Paycheck Fairness Act",
            summary="To amend the Fair Labor Standards Act of 1938 to provide more effective remedies to victims of discrimination in the payment of wages on the basis of sex.",
            summary_es="Para enmendar la Ley de Normas Laborales Justas de 1938 para proporcionar remedios más efectivos a las víctimas de discriminación en el pago de salarios basado en el sexo.",
            status="in_committee",
            bill_type="H.R.",
            jurisdiction="federal",
            sponsor="Rep. Rosa DeLauro (D-CT)",
            introduced_date=_ago(now, 78),
            last_action="Referred to House Committee on Education and Labor",
            last_action_date=_ago(now, 67),
            url="https://www.congress.gov/bill/119th-congress/house-bill/4",
            categories=["labor", "civil-rights", "wage-equality"],
            impact_tags=["workers", "equality", "wages"],
            progress=_progress(1),
        ),
        Bill(
            id="hr8-119",
            title="Bipartisan Background Checks Act of 2025",
            summary="To require a background check for every firearm sale.",
            summary_es="Para requerir una verificación de antecedentes para cada venta de armas de fuego.",
            status="passed_house",
            bill_type="H.R.",
            jurisdiction="federal",
            sponsor="Rep. Mike Thompson (D-CA)",
            introduced_date=_ago(now, 134),
            last_action="Passed House, referred to Senate Judiciary Committee",
            last_action_date=_ago(now, 23),
            url="https://www.congress.gov/bill/119th-congress/house-bill/8",
            categories=["gun-safety", "public-safety", "background-checks"],
            impact_tags=["safety", "guns", "background-checks"],
            progress=_progress(2),
            voting_history=[_vote(now, 23, "House", 227, 203)],
        ),
        Bill(
            id="s4-119",
            title="John Lewis Voting Rights Advancement Act",
            summary="To amend the Voting Rights Act of 1965 to revise the criteria for determining which States and political subdivisions are subject to section 4 of the Act.",
            summary_es="Para enmendar la Ley de Derechos de Voto de 1965 para revisar los criterios para determinar qué estados y subdivisiones políticas están sujetos a la sección 4 de la Ley.",
            status="in_committee",
            bill_type="S.",
            jurisdiction="federal",
            sponsor="Sen. Raphael Warnock (D-GA)",
            introduced_date=_ago(now, 89),
            last_action="Committee hearing held in Senate Judiciary",
            last_action_date=_ago(now, 14),
            url="https://www.congress.gov/bill/119th-congress/senate-bill/4",
            categories=["voting-rights", "civil-rights", "elections"],
            impact_tags=["voting", "rights", "democracy"],
            progress=_progress(1),
        ),
        Bill(
            id="tx-hb4-89",
            title="Texas Broadband Expansion Act",
            summary="To expand broadband internet access to underserved rural areas of Texas, with emphasis on border communities and districts like TX-23.",
            summary_es="Para expandir el acceso a internet de banda ancha a áreas rurales desatendidas de Texas, con énfasis en comunidades fronterizas y distritos como TX-23.",
            status="in_committee",
            bill_type="H.B.",
            jurisdiction="state",
            sponsor="Rep. Eddie Morales Jr. (D-Eagle Pass)",
            introduced_date=_ago(now, 56),
            last_action="Committee hearing in House Committee on State Affairs",
            last_action_date=_ago(now, 17),
            url="https://capitol.texas.gov/BillLookup/History.aspx?LegSess=89R&Bill=HB4",
            categories=["technology", "rural-development", "internet-access"],
            impact_tags=["broadband", "rural", "technology"],
            progress=_progress(1),
        ),
        Bill(
            id="tx-sb5-89",
            title="Texas Water Infrastructure Investment Act",
            summary="To provide state funding for critical water infrastructure projects, particularly in drought-prone regions including South and West Texas.",
            summary_es="Para proporcionar fondos estatales para proyectos críticos de infraestructura de agua, particularmente en regiones propensas a la sequía incluyendo el sur y oeste de Texas.",
            status="passed_senate",
            bill_type="S.B.",
            jurisdiction="state",
            sponsor="Sen. José Menéndez (D-San Antonio)",
            introduced_date=_ago(now, 98),
            last_action="Passed Senate, referred to House Committee on Natural Resources",
            last_action_date=_ago(now, 28),
            url="https://capitol.texas.gov/BillLookup/History.aspx?LegSess=89R&Bill=SB5",
            categories=["water", "infrastructure", "drought"],
            impact_tags=["water", "infrastructure", "drought-relief"],
            progress=BillProgress(committee=True, passed_senate=True),
            voting_history=[_vote(now, 28, "Senate", 25, 6)],
        ),
    ]


def fallback_news(now: Optional[datetime] = None) -> List[NewsArticle]:
    """General civic headlines used for search and breaking news."""
    now = now or utcnow()
    return [
        NewsArticle(
            id="fallback-news-1",
            title="Congress Passes Landmark Infrastructure Bill",
            summary="After months of negotiation, Congress has passed a comprehensive infrastructure bill investing in roads, bridges, and broadband access.",
            content="The Infrastructure Investment and Jobs Act represents one of the largest federal investments in American infrastructure in decades...",
            url="https://example.com/infrastructure-bill",
            source="Congressional News",
            author="Jane Smith",
            published_at=_ago(now, hours=3),
            category="breaking",
            related_bills=["H.R. 3684"],
            tags=["infrastructure", "transportation", "economy"],
        ),
        NewsArticle(
            id="fallback-news-2",
            title="New Climate Legislation Advances in Senate",
            summary="The Senate Environment Committee approved new climate legislation aimed at reducing carbon emissions by 50% by 2030.",
            content="The proposed legislation includes investments in renewable energy, electric vehicle infrastructure, and green jobs programs...",
            url="https://example.com/climate-bill",
            source="Environmental Times",
            author="Mike Johnson",
            published_at=_ago(now, 1),
            category="national",
            related_bills=["S. 1844"],
            tags=["climate", "environment", "energy"],
        ),
        NewsArticle(
            id="fallback-news-3",
            title="Local Town Hall Addresses Healthcare Access",
            summary="City council members met with residents to discuss improving healthcare access in underserved communities.",
            content="The town hall focused on plans to expand clinic hours and improve transportation to medical facilities...",
            url="https://example.com/town-hall-healthcare",
            source="Local Tribune",
            author="Sarah Davis",
            published_at=_ago(now, 2),
            category="local",
            tags=["healthcare", "community"],
        ),
    ]


def fallback_local_news(location: str, now: Optional[datetime] = None) -> List[NewsArticle]:
    """San Antonio / TX-23 local coverage, used whatever ``location`` was asked for."""
    now = now or utcnow()
    return [
        NewsArticle(
            id="local-fallback-1",
            title="San Antonio City Council Approves $2.8B Bond Package for Infrastructure",
            summary="San Antonio voters will decide on a historic bond package covering streets, drainage, parks, and public safety facilities across the city.",
            url="https://www.sanantonio.gov/gpa/news/fullstory/2025/bond-package-approved",
            source="San Antonio Express-News",
            author="Jessica Priest",
            published_at=_ago(now, hours=6),
            category="local",
            tags=["bonds", "infrastructure", "city-council"],
        ),
        NewsArticle(
            id="local-fallback-2",
            title="SAISD Board Approves New Bilingual Education Program Expansion",
            summary="San Antonio Independent School District will expand its dual-language programs to 15 additional elementary schools, serving more Hispanic students.",
            url="https://www.saisd.net/news/bilingual-expansion-2025",
            source="San Antonio Report",
            author="Bekah McNeel",
            published_at=_ago(now, hours=12),
            category="local",
            tags=["education", "bilingual", "SAISD"],
        ),
        NewsArticle(
            id="local-fallback-3",
            title="Bexar County Commissioners Approve Funding for Border Security Enhancement",
            summary="County commissioners allocated $12 million for enhanced border security measures, including technology upgrades and additional personnel.",
            url="https://www.bexar.org/news/border-security-funding-2025",
            source="KSAT 12 News",
            author="David Sears",
            published_at=_ago(now, hours=18),
            category="local",
            related_bills=["tx-hb2-89"],
            tags=["border-security", "county", "funding"],
        ),
        NewsArticle(
            id="local-fallback-4",
            title="VIA Metropolitan Transit Announces Expanded Routes to Serve TX-23 Communities",
            summary="VIA will add new bus routes connecting San Antonio to Uvalde, Del Rio, and Eagle Pass, improving public transportation in rural TX-23.",
            url="https://www.viainfo.net/news/rural-expansion-tx23-2025",
            source="San Antonio Business Journal",
            author="Madison Iszler",
            published_at=_ago(now, hours=24),
            category="local",
            related_bills=["hr4829-119"],
            tags=["transportation", "rural", "VIA", "TX-23"],
        ),
        NewsArticle(
            id="local-fallback-5",
            title="San Antonio Water System Invests $180M in Infrastructure Upgrades",
            summary="SAWS announces major water infrastructure improvements across the city, including pipeline replacements and treatment facility upgrades.",
            url="https://www.saws.org/news/infrastructure-investment-2025",
            source="MySA",
            author="Elena Craft",
            published_at=_ago(now, hours=30),
            category="local",
            related_bills=["tx-sb5-89"],
            tags=["water", "infrastructure", "SAWS"],
        ),
    ]


def fallback_explainers(now: Optional[datetime] = None) -> List[NewsArticle]:
    now = now or utcnow()
    return [
        NewsArticle(
            id="explainer-fallback-1",
            title="How Does Congressional Committee System Work?",
            summary="A comprehensive guide to understanding how congressional committees review, modify, and advance legislation through the federal process.",
            content="Congressional committees serve as the workhorses of Congress, where most of the detailed work on legislation happens...",
            url="https://example.com/explainer/congressional-committees",
            source="Civic Education Hub",
            author="Education Team",
            published_at=_ago(now, hours=6),
            category="explainer",
            tags=["congress", "committees", "education"],
        ),
        NewsArticle(
            id="explainer-fallback-2",
            title="What Is the Federal Budget Process?",
            summary="Breaking down the complex federal budget process, from presidential proposals to congressional appropriations and final spending bills.",
            content="The federal budget process is a year-long cycle that involves multiple steps and key deadlines...",
            url="https://example.com/explainer/federal-budget",
            source="Government Guide",
            author="Policy Analyst",
            published_at=_ago(now, hours=12),
            category="explainer",
            tags=["budget", "federal", "education"],
        ),
    ]


def tx23_legislators() -> List[Legislator]:
    """Federal, state and local officials serving Texas's 23rd district."""
    return [
        Legislator(
            id="tony-gonzales-tx23",
            name="Tony Gonzales",
            title="U.S. Representative",
            party="Republican",
            state="TX",
            district="TX-23",
            level="federal",
            office="1408 Longworth House Office Building",
            phone="(202) 225-4511",
            email="tony.gonzales@mail.house.gov",
            website="https://tonygonzales.house.gov",
            image_url="https://www.congress.gov/img/member/G000594_200.jpg",
            biography="Tony Gonzales represents Texas's 23rd congressional district, which stretches from San Antonio to El Paso along the border. He serves on the House Armed Services and Appropriations Committees, focusing on border security, military affairs, and rural healthcare.",
            social_media={"twitter": "@RepTonyGonzales", "facebook": "RepTonyGonzales"},
        ),
        Legislator(
            id="john-cornyn-tx",
            name="John Cornyn",
            title="U.S. Senator",
            party="Republican",
            state="TX",
            level="federal",
            office="517 Hart Senate Office Building",
            phone="(202) 224-2934",
            email="john.cornyn@cornyn.senate.gov",
            website="https://www.cornyn.senate.gov",
            image_url="https://www.congress.gov/img/member/C001056_200.jpg",
            biography="John Cornyn has served as U.S. Senator from Texas since 2002. He previously served as Texas Attorney General and on the Texas Supreme Court. He focuses on border security, tax policy, and judicial issues.",
            social_media={"twitter": "@JohnCornyn", "facebook": "JohnCornyn"},
        ),
        Legislator(
            id="ted-cruz-tx",
            name="Ted Cruz",
            title="U.S. Senator",
            party="Republican",
            state="TX",
            level="federal",
            office="404 Russell Senate Office Building",
            phone="(202) 224-5922",
            email="ted.cruz@cruz.senate.gov",
            website="https://www.cruz.senate.gov",
            image_url="https://www.congress.gov/img/member/C001098_200.jpg",
            biography="Ted Cruz has served as U.S. Senator from Texas since 2013. He previously served as Solicitor General of Texas and ran for President in 2016. He focuses on constitutional issues, foreign policy, and limited government.",
            social_media={"twitter": "@SenTedCruz", "facebook": "SenatorTedCruz"},
        ),
        Legislator(
            id="greg-abbott-tx",
            name="Greg Abbott",
            title="Governor",
            party="Republican",
            state="TX",
            level="state",
            office="Office of the Governor, P.O. Box 12428",
            phone="(512) 463-2000",
            email="greg.abbott@gov.texas.gov",
            website="https://gov.texas.gov",
            image_url="https://gov.texas.gov/uploads/images/press/Greg_Abbott_Official_2019.jpg",
            biography="Greg Abbott has served as the 48th Governor of Texas since 2015. He previously served as Texas Attorney General for 12 years and on the Texas Supreme Court. He focuses on border security, economic development, and conservative governance.",
            social_media={"twitter": "@GovAbbott", "facebook": "TexasGovernor"},
        ),
        Legislator(
            id="ron-nirenberg-sa",
            name="Ron Nirenberg",
            title="Mayor",
            party="Nonpartisan",
            state="TX",
            level="local",
            office="114 W. Commerce St., San Antonio, TX 78205",
            phone="(210) 207-7060",
            email="mayor@sanantonio.gov",
            website="https://www.sanantonio.gov/Mayor",
            biography="Ron Nirenberg has served as Mayor of San Antonio since 2017. He previously served on the San Antonio City Council and worked in media and nonprofit sectors. He focuses on economic development, infrastructure, and quality of life issues.",
            social_media={"twitter": "@RonNirenberg", "facebook": "MayorRonNirenberg"},
        ),
        Legislator(
            id="pete-flores-tx19",
            name="Pete Flores",
            title="Texas State Senator",
            party="Republican",
            state="TX",
            district="SD-19",
            level="state",
            office="P.O. Box 12068, Austin, TX 78711",
            phone="(512) 463-0119",
            email="pete.flores@senate.texas.gov",
            website="https://senate.texas.gov/member.php?d=19",
            biography="Pete Flores represents Texas Senate District 19, which includes parts of the TX-23 area. He focuses on education, healthcare, and rural issues affecting South Texas communities.",
            social_media={"twitter": "@PeteFloresSD19"},
        ),
    ]


def tx23_events(now: Optional[datetime] = None) -> List[CivicEvent]:
    """Upcoming town halls, hearings and community forums around TX-23."""
    now = now or utcnow()
    return [
        CivicEvent(
            id="tony-gonzales-th-feb2025",
            title="Congressman Tony Gonzales Town Hall - Border Security & Healthcare",
            description="Join Congressman Tony Gonzales for a town hall discussion on border security initiatives, healthcare access in rural TX-23, and veteran services. Interpretation available in Spanish.",
            event_type="town_hall",
            date=_ahead(now, 14),
            end_date=_ahead(now, 14, hours=2),
            location="San Antonio College - McAllister Auditorium",
            address="1819 N Main Ave, San Antonio, TX 78212",
            virtual_url="https://gonzales.house.gov/live",
            organizer="Office of Congressman Tony Gonzales",
            organizer_contact="(210) 921-3130",
            level="federal",
            max_attendees=500,
            current_attendees=127,
            requires_rsvp=True,
            rsvp_deadline=_ahead(now, 12),
            related_bills=["hr1-119", "hr4829-119"],
            tags=["border-security", "healthcare", "veterans"],
            language="both",
            accessibility_info="ADA accessible venue. ASL interpretation and Spanish translation available upon request.",
            agenda="6:00 PM - Registration & Check-in\n6:30 PM - Opening Remarks\n6:45 PM - Border Security Update\n7:15 PM - Healthcare Initiatives\n7:45 PM - Q&A Session\n8:30 PM - Closing",
            created_at=_ago(now, 7),
            updated_at=_ago(now, 1),
        ),
        CivicEvent(
            id="tony-gonzales-th-del-rio-mar2025",
            title="Mobile Town Hall - Del Rio Community Meeting",
            description="Congressman Gonzales brings his mobile town hall to Del Rio to discuss infrastructure improvements, rural broadband expansion, and agricultural policy affecting ranchers and farmers in TX-23.",
            event_type="town_hall",
            date=_ahead(now, 21),
            end_date=_ahead(now, 21, hours=1.5),
            location="Del Rio Civic Center",
            address="1915 Veterans Blvd, Del Rio, TX 78840",
            organizer="Office of Congressman Tony Gonzales",
            organizer_contact="(830) 422-2040",
            level="federal",
            max_attendees=200,
            current_attendees=43,
            requires_rsvp=True,
            rsvp_deadline=_ahead(now, 19),
            related_bills=["tx-hb4-89", "hr4829-119"],
            tags=["infrastructure", "broadband", "agriculture", "rural"],
            language="both",
            accessibility_info="Wheelchair accessible. Spanish interpretation provided.",
            created_at=_ago(now, 5),
            updated_at=_ago(now, 2),
        ),
        CivicEvent(
            id="tx-senate-budget-hearing-mar2025",
            title="Texas Senate Finance Committee - District 19 Budget Hearing",
            description="Senator Pete Flores hosts a public hearing on the state budget allocation for Senate District 19, including funding for rural schools, healthcare facilities, and infrastructure projects.",
            event_type="hearing",
            date=_ahead(now, 28),
            end_date=_ahead(now, 28, hours=3),
            location="Pleasanton City Hall Council Chambers",
            address="1022 Main St, Pleasanton, TX 78064",
            virtual_url="https://senate.texas.gov/district19/live",
            organizer="Office of Senator Pete Flores",
            organizer_contact="(830) 569-0119",
            level="state",
            max_attendees=100,
            current_attendees=23,
            requires_rsvp=False,
            related_bills=["tx-sb5-89", "tx-hb4-89"],
            tags=["budget", "education", "healthcare", "infrastructure"],
            language="en",
            accessibility_info="Accessible parking and entrance available.",
            created_at=_ago(now, 10),
            updated_at=_ago(now, 3),
        ),
        CivicEvent(
            id="sa-city-council-housing-feb2025",
            title="San Antonio City Council - Housing Development Public Input Session",
            description="City Council District 5 hosts a public input session on the proposed $2.8B bond package, focusing on affordable housing initiatives and neighborhood development in areas representing TX-23.",
            event_type="community_forum",
            date=_ahead(now, 10),
            end_date=_ahead(now, 10, hours=2.5),
            location="Las Palmas Library - Community Room",
            address="515 Castroville Rd, San Antonio, TX 78212",
            virtual_url="https://sanantonio.gov/council/meetings",
            organizer="San Antonio City Council District 5",
            organizer_contact="(210) 207-7276",
            level="local",
            max_attendees=80,
            current_attendees=34,
            requires_rsvp=True,
            rsvp_deadline=_ahead(now, 8),
            tags=["housing", "bonds", "development", "neighborhood"],
            language="both",
            accessibility_info="ADA compliant facility. Spanish interpretation available.",
            created_at=_ago(now, 4),
            updated_at=_ago(now, 1),
        ),
        CivicEvent(
            id="bexar-county-budget-workshop-mar2025",
            title="Bexar County Commissioners Court - Border Security Budget Workshop",
            description="Public workshop on the county's $12 million border security enhancement budget, including technology upgrades and personnel increases for areas within TX-23.",
            event_type="committee_meeting",
            date=_ahead(now, 35),
            end_date=_ahead(now, 35, hours=4),
            location="Bexar County Courthouse - Commissioners Courtroom",
            address="100 Dolorosa St, San Antonio, TX 78205",
            virtual_url="https://www.bexar.org/meetings",
            organizer="Bexar County Commissioners Court",
            organizer_contact="(210) 335-2555",
            level="local",
            max_attendees=150,
            current_attendees=15,
            requires_rsvp=False,
            related_bills=["tx-hb2-89"],
            tags=["border-security", "budget", "county", "public-safety"],
            language="en",
            created_at=_ago(now, 14),
            updated_at=_ago(now, 7),
        ),
        CivicEvent(
            id="uvalde-community-forum-feb2025",
            title="Uvalde Community Recovery Forum - One Year Update",
            description="Community forum discussing ongoing recovery efforts, mental health services, and school safety improvements. Open to all TX-23 residents.",
            event_type="community_forum",
            date=_ahead(now, 17),
            end_date=_ahead(now, 17, hours=2),
            location="Uvalde Memorial Hospital Conference Center",
            address="1025 Garner Field Rd, Uvalde, TX 78801",
            virtual_url="https://uvaldetx.gov/meetings",
            organizer="City of Uvalde",
            organizer_contact="(830) 278-3315",
            level="local",
            max_attendees=200,
            current_attendees=89,
            requires_rsvp=True,
            rsvp_deadline=_ahead(now, 15),
            tags=["community", "recovery", "mental-health", "school-safety"],
            language="both",
            accessibility_info="Fully accessible venue. Counseling support available on-site.",
            created_at=_ago(now, 21),
            updated_at=_ago(now, 2),
        ),
    ]
