import django.db.models.deletion
import django_extensions.db.fields
import simple_history.models
from django.conf import settings
from django.db import migrations, models


HISTORY_TYPE_CHOICES = [('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')]
STATE_CHOICES = [('active', 'Active'), ('revoked', 'Revoked')]
HISTORY_OPTIONS = {
    'ordering': ('-history_date', '-history_id'),
    'get_latest_by': ('history_date', 'history_id'),
}


def history_fields():
    return [
        ('history_id', models.AutoField(primary_key=True, serialize=False)),
        ('history_date', models.DateTimeField(db_index=True)),
        ('history_change_reason', models.CharField(max_length=100, null=True)),
        ('history_type', models.CharField(choices=HISTORY_TYPE_CHOICES, max_length=1)),
        ('history_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
    ]


def timestamp_fields():
    return [
        ('created', django_extensions.db.fields.CreationDateTimeField(auto_now_add=True, verbose_name='created')),
        ('modified', django_extensions.db.fields.ModificationDateTimeField(auto_now=True, verbose_name='modified')),
    ]


def historical_fk(to):
    return models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to=to)


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='SalesTeam',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *timestamp_fields(),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True, default='')),
                ('is_active', models.BooleanField(db_index=True, default=True, help_text='Deactivated teams accept no new members.')),
                ('manager', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='managed_sales_teams', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'get_latest_by': 'modified',
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Workshop',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *timestamp_fields(),
                ('title', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True, default='')),
                ('scheduled_at', models.DateTimeField(blank=True, null=True)),
                ('is_active', models.BooleanField(db_index=True, default=True)),
                ('creator', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='created_workshops', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'get_latest_by': 'modified',
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='SalesTeamMember',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *timestamp_fields(),
                ('state', models.CharField(choices=STATE_CHOICES, db_index=True, default='active', max_length=25)),
                ('revoked_at', models.DateTimeField(blank=True, null=True)),
                ('sales_person', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sales_team_memberships', to=settings.AUTH_USER_MODEL)),
                ('team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='members', to='sales_hierarchy.salesteam')),
            ],
        ),
        migrations.AddConstraint(
            model_name='salesteammember',
            constraint=models.UniqueConstraint(condition=models.Q(('state', 'active')), fields=('sales_person',), name='unique_active_membership_per_sales_person'),
        ),
        migrations.CreateModel(
            name='SalesPersonWorkshopAccess',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *timestamp_fields(),
                ('state', models.CharField(choices=STATE_CHOICES, db_index=True, default='active', max_length=25)),
                ('revoked_at', models.DateTimeField(blank=True, null=True)),
                ('granted_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='granted_workshop_access', to=settings.AUTH_USER_MODEL)),
                ('sales_person', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='workshop_access', to=settings.AUTH_USER_MODEL)),
                ('workshop', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sales_person_access', to='sales_hierarchy.workshop')),
            ],
            options={
                'verbose_name_plural': 'sales person workshop access',
                'unique_together': {('sales_person', 'workshop')},
            },
        ),
        migrations.CreateModel(
            name='HistoricalSalesTeam',
            fields=[
                ('id', models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name='ID')),
                *timestamp_fields(),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True, default='')),
                ('is_active', models.BooleanField(db_index=True, default=True, help_text='Deactivated teams accept no new members.')),
                ('manager', historical_fk(settings.AUTH_USER_MODEL)),
                *history_fields(),
            ],
            options={
                'verbose_name': 'historical sales team',
                'verbose_name_plural': 'historical sales teams',
                **HISTORY_OPTIONS,
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name='HistoricalSalesTeamMember',
            fields=[
                ('id', models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name='ID')),
                *timestamp_fields(),
                ('state', models.CharField(choices=STATE_CHOICES, db_index=True, default='active', max_length=25)),
                ('revoked_at', models.DateTimeField(blank=True, null=True)),
                ('sales_person', historical_fk(settings.AUTH_USER_MODEL)),
                ('team', historical_fk('sales_hierarchy.salesteam')),
                *history_fields(),
            ],
            options={
                'verbose_name': 'historical sales team member',
                'verbose_name_plural': 'historical sales team members',
                **HISTORY_OPTIONS,
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name='HistoricalSalesPersonWorkshopAccess',
            fields=[
                ('id', models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name='ID')),
                *timestamp_fields(),
                ('state', models.CharField(choices=STATE_CHOICES, db_index=True, default='active', max_length=25)),
                ('revoked_at', models.DateTimeField(blank=True, null=True)),
                ('granted_by', historical_fk(settings.AUTH_USER_MODEL)),
                ('sales_person', historical_fk(settings.AUTH_USER_MODEL)),
                ('workshop', historical_fk('sales_hierarchy.workshop')),
                *history_fields(),
            ],
            options={
                'verbose_name': 'historical sales person workshop access',
                'verbose_name_plural': 'historical sales person workshop access',
                **HISTORY_OPTIONS,
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
