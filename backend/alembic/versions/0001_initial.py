"""initial airline schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-16
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table('person',
        sa.Column('ssn', sa.String(length=20), primary_key=True),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
    )
    op.create_index('ix_person_last_name', 'person', ['last_name'])
    op.create_table('passenger',
        sa.Column('ssn', sa.String(length=20), sa.ForeignKey('person.ssn', ondelete='CASCADE'), primary_key=True),
        sa.Column('passport_num', sa.String(length=32), nullable=True, unique=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=32), nullable=True),
    )
    op.create_index('ix_passenger_email', 'passenger', ['email'])
    op.create_table('aircraft',
        sa.Column('tail_number', sa.String(length=16), primary_key=True),
        sa.Column('id', sa.String(length=32), nullable=True),
        sa.Column('model', sa.String(length=64), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=32), nullable=False, server_default='ACTIVE'),
    )
    op.create_table('flight',
        sa.Column('flight_num', sa.String(length=16), primary_key=True),
        sa.Column('depart_time', sa.DateTime(), nullable=False),
        sa.Column('arrival_time', sa.DateTime(), nullable=False),
        sa.Column('origin', sa.String(length=64), nullable=False),
        sa.Column('destination', sa.String(length=64), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='SCHEDULED'),
        sa.Column('gate', sa.String(length=8), nullable=True),
        sa.Column('terminal', sa.String(length=8), nullable=True),
        sa.Column('tail_number', sa.String(length=16), sa.ForeignKey('aircraft.tail_number'), nullable=False),
    )
    op.create_index('ix_flight_depart_time', 'flight', ['depart_time'])
    op.create_index('ix_flight_origin', 'flight', ['origin'])
    op.create_index('ix_flight_destination', 'flight', ['destination'])
    op.create_table('ticket',
        sa.Column('ticket_num', sa.String(length=32), primary_key=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('seat_num', sa.String(length=8), nullable=False),
        sa.Column('class', sa.String(length=16), nullable=False),
        sa.Column('date_booked', sa.Date(), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='CONFIRMED'),
        sa.Column('passenger_ssn', sa.String(length=20), sa.ForeignKey('passenger.ssn'), nullable=False),
        sa.Column('flight_num', sa.String(length=16), sa.ForeignKey('flight.flight_num'), nullable=False),
        sa.CheckConstraint("\"class\" IN ('ECONOMY', 'BUSINESS', 'FIRST')", name='ck_ticket_class'),
    )
    op.create_index('ix_ticket_passenger_ssn', 'ticket', ['passenger_ssn'])
    op.create_table('incident',
        sa.Column('incident_num', sa.String(length=32), primary_key=True),
        sa.Column('time_occurred', sa.DateTime(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('tail_number', sa.String(length=16), sa.ForeignKey('aircraft.tail_number'), nullable=False),
    )
    op.create_index('ix_incident_tail_number', 'incident', ['tail_number'])
    op.create_table('pilot_of',
        sa.Column('pilot_id', sa.String(length=20), primary_key=True),
        sa.Column('flight_num', sa.String(length=16), sa.ForeignKey('flight.flight_num', ondelete='CASCADE'), primary_key=True),
    )
    op.create_table('staff_of',
        sa.Column('plane_host_id', sa.String(length=20), primary_key=True),
        sa.Column('flight_num', sa.String(length=16), sa.ForeignKey('flight.flight_num', ondelete='CASCADE'), primary_key=True),
    )

def downgrade():
    op.drop_table('staff_of')
    op.drop_table('pilot_of')
    op.drop_index('ix_incident_tail_number', table_name='incident')
    op.drop_table('incident')
    op.drop_index('ix_ticket_passenger_ssn', table_name='ticket')
    op.drop_table('ticket')
    op.drop_index('ix_flight_destination', table_name='flight')
    op.drop_index('ix_flight_origin', table_name='flight')
    op.drop_index('ix_flight_depart_time', table_name='flight')
    op.drop_table('flight')
    op.drop_table('aircraft')
    op.drop_index('ix_passenger_email', table_name='passenger')
    op.drop_table('passenger')
    op.drop_index('ix_person_last_name', table_name='person')
    op.drop_table('person')
